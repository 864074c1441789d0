"""Errors raised by the repository."""

from __future__ import annotations

from typing import Optional

from node_graph.core.models import NodeId


class NodeRepoError(Exception):
    """Catch-all for repository failures not covered by a narrower error."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or "unknown node repo error")


class UnknownNodeIdError(NodeRepoError):
    """An edge points at an id that was never stored."""

    def __init__(self, node_id: NodeId) -> None:
        self.node_id = node_id
        super().__init__(f"unknown NodeId: {int(node_id)}")
