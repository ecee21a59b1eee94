"""Family relationship graph package."""
from src.graph.family.errors import FamilyNetworkError, MemberNotFound, NetworkNotFound
from src.graph.family.relationships import RelationType, reciprocal
from src.graph.family.graph import RelationshipGraph
from src.graph.family.queries import ChainResolver
from src.graph.family.service import FamilyNetworkService

__all__ = [
    "FamilyNetworkError",
    "MemberNotFound",
    "NetworkNotFound",
    "RelationType",
    "reciprocal",
    "RelationshipGraph",
    "ChainResolver",
    "FamilyNetworkService",
]
