from node_graph.core.errors import NodeRepoError, UnknownNodeIdError
from node_graph.core.filters import TagFilter, accept_all, match_tag
from node_graph.core.models import Content, Edges, Node, NodeId, Path, String
from node_graph.core.repository import Repository, RepositoryConfig

__all__ = [
    "Content",
    "Edges",
    "Node",
    "NodeId",
    "NodeRepoError",
    "Path",
    "Repository",
    "RepositoryConfig",
    "String",
    "TagFilter",
    "UnknownNodeIdError",
    "accept_all",
    "match_tag",
]
