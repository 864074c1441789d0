"""In-memory storage backend: a dict arena keyed by NodeId."""

from __future__ import annotations

import copy
import dataclasses
from typing import Dict, List, Optional

from node_graph.core.models import Node, NodeId
from node_graph.storage.base import BaseStorage


class MemoryStorage(BaseStorage):
    """In-memory node storage backed by a single dict.

    Edges live inside node content as plain ids, so cycles need no special
    handling here. All data is lost when the process exits.
    """

    def __init__(self) -> None:
        self._nodes: Dict[NodeId, Node] = {}

    def save_node(self, node: Node) -> None:
        # Rebuilding re-runs Node validation, so fields reassigned after
        # construction are normalized before keying.
        stored = dataclasses.replace(node)
        self._nodes[stored.id] = copy.deepcopy(stored)

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._nodes

    def get_node(self, node_id: NodeId) -> Optional[Node]:
        node = self._nodes.get(node_id)
        if node is None:
            return None
        return copy.deepcopy(node)

    def all_nodes(self) -> List[Node]:
        return [copy.deepcopy(self._nodes[key]) for key in sorted(self._nodes)]

    def __len__(self) -> int:
        return len(self._nodes)
