"""Core data models for Node Graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Set, Tuple, Union


@dataclass(frozen=True, order=True)
class NodeId:
    """Opaque handle for a node, wrapping a non-negative integer.

    Used both as a storage key and as an edge reference. Uniqueness is
    enforced by the repository, not by this type.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"NodeId must be an integer, got {self.value!r}")
        if self.value < 0:
            raise ValueError(f"NodeId must be non-negative, got {self.value}")

    @classmethod
    def of(cls, value: Union[int, "NodeId"]) -> NodeId:
        """Return ``value`` as a NodeId, wrapping plain integers."""
        if isinstance(value, NodeId):
            return value
        return cls(value)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"NodeId({self.value})"


@dataclass(frozen=True)
class Edges:
    """Router content: forwards traversal to the referenced nodes."""

    ids: Tuple[NodeId, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "ids", tuple(NodeId.of(i) for i in self.ids))


@dataclass(frozen=True)
class String:
    """Leaf content holding an arbitrary text blob."""

    text: str


@dataclass(frozen=True)
class Path:
    """Leaf content holding a filesystem-path-shaped string."""

    text: str


Content = Union[Edges, String, Path]

LEAF_TYPES = (String, Path)


@dataclass
class Node:
    """An addressable vertex in the graph.

    Attributes:
        id: Key under which the repository stores this node.
        tags: Labels examined by traversal filters. Only leaf nodes are
            filtered; tags on an ``Edges`` node are inert.
        content: Either ``Edges`` (routing to other nodes) or a leaf payload
            (``String`` / ``Path``).

    ``Node()`` is the root-shaped default: id 0, no tags, no edges.
    """

    id: NodeId = field(default_factory=lambda: NodeId(0))
    tags: Set[str] = field(default_factory=set)
    content: Content = field(default_factory=Edges)

    def __post_init__(self) -> None:
        self.id = NodeId.of(self.id)
        if isinstance(self.tags, str):
            raise ValueError("Node tags must be a collection of strings, not a string")
        self.tags = set(self.tags)
        for tag in self.tags:
            if not isinstance(tag, str):
                raise ValueError(f"Node tags must be strings, got {tag!r}")

    @classmethod
    def edges(
        cls,
        node_id: Union[int, NodeId],
        targets: Iterable[Union[int, NodeId]],
        tags: Iterable[str] = (),
    ) -> Node:
        return cls(id=node_id, tags=set(tags), content=Edges(tuple(targets)))

    @classmethod
    def string(
        cls, node_id: Union[int, NodeId], text: str, tags: Iterable[str] = ()
    ) -> Node:
        return cls(id=node_id, tags=set(tags), content=String(text))

    @classmethod
    def path(
        cls, node_id: Union[int, NodeId], text: str, tags: Iterable[str] = ()
    ) -> Node:
        return cls(id=node_id, tags=set(tags), content=Path(text))

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.content, LEAF_TYPES)
