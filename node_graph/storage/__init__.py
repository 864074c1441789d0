from node_graph.storage.base import BaseStorage
from node_graph.storage.memory import MemoryStorage

__all__ = ["BaseStorage", "MemoryStorage"]
