"""Node Graph: an in-memory, tag-filtered content graph."""

__version__ = "0.1.0"

from node_graph.core.errors import NodeRepoError, UnknownNodeIdError
from node_graph.core.filters import accept_all, match_tag
from node_graph.core.models import Edges, Node, NodeId, Path, String
from node_graph.core.repository import Repository, RepositoryConfig

__all__ = [
    "Edges",
    "Node",
    "NodeId",
    "NodeRepoError",
    "Path",
    "Repository",
    "RepositoryConfig",
    "String",
    "UnknownNodeIdError",
    "__version__",
    "accept_all",
    "match_tag",
]
