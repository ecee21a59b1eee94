"""Graph package - family networks and relationship chains."""

from src.graph.models import ChainLink, Edge, RelationshipChain
from src.graph.family.graph import RelationshipGraph
from src.graph.family.queries import ChainResolver
from src.graph.network_store import InMemoryNetworkStore, SQLiteNetworkStore, create_store

__all__ = [
    "ChainLink",
    "Edge",
    "RelationshipChain",
    "RelationshipGraph",
    "ChainResolver",
    "InMemoryNetworkStore",
    "SQLiteNetworkStore",
    "create_store",
]
