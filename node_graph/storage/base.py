"""Abstract base class for Node Graph storage backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from node_graph.core.models import Node, NodeId


class BaseStorage(ABC):
    """Interface that all storage backends must implement.

    Backends own their nodes: ``save_node`` stores a copy and ``get_node``
    hands out a copy, so callers never alias stored state.
    """

    @abstractmethod
    def save_node(self, node: Node) -> None:
        """Store a node. Replaces any node already stored under the same id."""

    @abstractmethod
    def get_node(self, node_id: NodeId) -> Optional[Node]:
        """Return a node by id, or None if not found."""

    @abstractmethod
    def has_node(self, node_id: NodeId) -> bool:
        """Return True if a node is stored under the given id."""

    @abstractmethod
    def all_nodes(self) -> List[Node]:
        """Return all nodes in storage, ordered by id."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of stored nodes."""
