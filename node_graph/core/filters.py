"""Tag predicates passed to ``Repository.traverse``.

A filter is any pure callable taking a node's tag set and returning a bool.
It is only ever called for leaf nodes, with a frozen copy of the tags.
"""

from __future__ import annotations

from typing import AbstractSet, Callable

TagFilter = Callable[[AbstractSet[str]], bool]


def accept_all() -> TagFilter:
    """Filter that keeps every leaf, including untagged ones."""

    def _accept(tags: AbstractSet[str]) -> bool:
        return True

    return _accept


def match_tag(tag: str) -> TagFilter:
    """Filter that keeps leaves carrying exactly ``tag``."""

    def _match(tags: AbstractSet[str]) -> bool:
        return tag in tags

    return _match
