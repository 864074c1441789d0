"""Repository — the primary public API for Node Graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Union

from node_graph.core.errors import NodeRepoError, UnknownNodeIdError
from node_graph.core.filters import TagFilter
from node_graph.core.models import LEAF_TYPES, Content, Edges, Node, NodeId
from node_graph.storage.base import BaseStorage
from node_graph.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)


@dataclass
class RepositoryConfig:
    """Construction-time settings for a repository.

    Attributes:
        root: Id of the node every traversal starts from.
        dump_level: Log level used by ``bfs_dump`` when no visitor is given.
    """

    root: int = 0
    dump_level: int = logging.INFO


class Repository:
    """A graph-structured content store addressed by integer ids.

    Example::

        from node_graph import Node, Repository, match_tag

        repo = Repository()
        repo.put(Node.edges(0, [1]))
        repo.put(Node.string(1, "aaa", tags={"tag1"}))
        repo.traverse(match_tag("tag1"))   # [String(text='aaa')]
    """

    def __init__(
        self,
        storage: Optional[BaseStorage] = None,
        config: Optional[RepositoryConfig] = None,
    ) -> None:
        """
        Args:
            storage: Backend holding the nodes. A fresh ``MemoryStorage``
                if None.
            config: Root id and dump settings. Uses defaults if None.
        """
        self._storage = storage if storage is not None else MemoryStorage()
        self._config = config or RepositoryConfig()
        self._root = NodeId.of(self._config.root)

    def __len__(self) -> int:
        return len(self._storage)

    def __contains__(self, node_id: Union[int, NodeId]) -> bool:
        return self._storage.has_node(NodeId.of(node_id))

    # ── Storage ──────────────────────────────────────────────────────

    def root(self) -> NodeId:
        """Return the id every traversal starts from."""
        return self._root

    def get(self, node_id: Union[int, NodeId]) -> Optional[Node]:
        """Return a copy of the node stored under ``node_id``, or None."""
        return self._storage.get_node(NodeId.of(node_id))

    def put(self, node: Node) -> NodeId:
        """Store a copy of ``node``, replacing any node with the same id.

        Edge targets are not checked; dangling edges only fail once a
        traversal reaches them.
        """
        node_id = NodeId.of(node.id)
        self._storage.save_node(node)
        logger.debug("Stored node %d (%d nodes)", int(node_id), len(self._storage))
        return node_id

    # ── Traversal ────────────────────────────────────────────────────

    def _walk(self) -> Iterator[Node]:
        # Explicit stack, so siblings come out last-pushed-first: a
        # depth-first walk. Each id is expanded at most once per call.
        stack: List[NodeId] = [self._root]
        visited: set[NodeId] = set()

        while stack:
            node_id = stack.pop()
            if node_id in visited:
                continue
            visited.add(node_id)

            node = self.get(node_id)
            if node is None:
                logger.warning("Traversal reached dangling NodeId %d", int(node_id))
                raise UnknownNodeIdError(node_id)

            if isinstance(node.content, Edges):
                stack.extend(node.content.ids)
            elif not isinstance(node.content, LEAF_TYPES):
                raise NodeRepoError(
                    f"node {int(node_id)} has unsupported content "
                    f"{type(node.content).__name__}"
                )
            yield node

    def traverse(self, tag_filter: TagFilter) -> List[Content]:
        """Collect leaf content reachable from the root.

        Edge containers are always expanded and never passed to the filter.
        Leaves are kept when ``tag_filter(tags)`` is true.

        Args:
            tag_filter: Pure predicate over a frozen copy of a leaf's tags.

        Returns:
            Leaf content in visitation order. Never contains ``Edges``.

        Raises:
            UnknownNodeIdError: If an edge points at an id that was never
                stored. No partial result is returned.
        """
        content: List[Content] = []
        visited = 0
        for node in self._walk():
            visited += 1
            if node.is_leaf and tag_filter(frozenset(node.tags)):
                content.append(node.content)

        logger.debug("Traversal visited %d nodes, kept %d", visited, len(content))
        return content

    def bfs_dump(self, visit: Optional[Callable[[Node], None]] = None) -> int:
        """Visit every node reachable from the root, edge containers included.

        Despite the name the order is the same depth-first order that
        ``traverse`` uses. Without ``visit`` each node is logged at
        ``config.dump_level``.

        Returns:
            Number of nodes visited.

        Raises:
            UnknownNodeIdError: On the first dangling edge reached.
        """
        count = 0
        for node in self._walk():
            count += 1
            if visit is not None:
                visit(node)
            else:
                logger.log(
                    self._config.dump_level,
                    "node %d tags=%s content=%r",
                    int(node.id),
                    sorted(node.tags),
                    node.content,
                )
        return count
