"""Relationship graph for one family network."""

import logging
from typing import Optional

from src.models import FamilyNetwork, Member, RelationshipRecord
from src.graph.models import Edge
from src.graph.family.errors import MemberNotFound
from src.graph.family.relationships import RelationType, reciprocal

logger = logging.getLogger(__name__)


class RelationshipGraph:
    """
    Members of a family network and the typed edges between them.

    Every relationship is stored from both endpoints: A -> B with the given
    type and B -> A with its reciprocal. Adjacency lists are the source of
    truth; the "fromId-toId" label map is derived from them.

    Usage:
        graph = RelationshipGraph()
        ramesh = graph.add_member("Ramesh")
        padma = graph.add_member("Padma")
        graph.add_relationship(ramesh.id, padma.id, "spouse")
    """

    def __init__(self):
        self._members: dict[str, Member] = {}
        self._edges: dict[str, list[Edge]] = {}
        self._labels: dict[str, str] = {}
        self._records: list[RelationshipRecord] = []

    # ─────────────────────────────────────────
    # Members
    # ─────────────────────────────────────────

    def add_member(self, name: str, **attributes) -> Member:
        """Create a member with a fresh id and no relationships."""
        return self.add_existing_member(Member(name=name, **attributes))

    def add_existing_member(self, member: Member) -> Member:
        """Attach an already built member record."""
        self._members[member.id] = member
        self._edges.setdefault(member.id, [])
        logger.debug("Added member %s (%s)", member.name, member.id)
        return member

    def get_member(self, member_id: str) -> Optional[Member]:
        return self._members.get(member_id)

    def has_member(self, member_id: str) -> bool:
        return member_id in self._members

    @property
    def members(self) -> list[Member]:
        """Members in insertion order."""
        return list(self._members.values())

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, member_id: str) -> bool:
        return self.has_member(member_id)

    # ─────────────────────────────────────────
    # Relationships
    # ─────────────────────────────────────────

    def add_relationship(self, from_id: str, to_id: str, relationship: str) -> None:
        """
        Record a relationship and its reciprocal.

        Not idempotent: calling twice adds two parallel edges.

        Raises:
            MemberNotFound: if either member is not in this graph
        """
        for member_id in (from_id, to_id):
            if member_id not in self._members:
                logger.warning("Relationship %s -> %s rejected: unknown member %s",
                               from_id, to_id, member_id)
                raise MemberNotFound(member_id)

        relationship = _label(relationship)
        back = reciprocal(relationship)
        self._append(from_id, to_id, relationship)
        self._append(to_id, from_id, back)
        logger.info("Added relationship %s -[%s]-> %s (reciprocal %s)",
                    from_id, relationship, to_id, back)

    def _append(self, from_id: str, to_id: str, relationship: str) -> None:
        self._edges.setdefault(from_id, []).append(Edge(to_id, relationship))
        self._labels[f"{from_id}-{to_id}"] = relationship
        self._records.append(RelationshipRecord(from_id=from_id, to_id=to_id, relationship=relationship))

    def neighbors(self, member_id: str) -> list[Edge]:
        """Outgoing edges in insertion order; empty for unknown members."""
        return list(self._edges.get(member_id, []))

    def relationship_between(self, from_id: str, to_id: str) -> Optional[str]:
        """Directed label from one member towards another."""
        return self._labels.get(f"{from_id}-{to_id}")

    def member_relationships(self, member_id: str) -> list[dict]:
        """Relationships of a member with the related member's name."""
        result = []
        for edge in self.neighbors(member_id):
            related = self.get_member(edge.member_id)
            if related:
                result.append({
                    "memberId": related.id,
                    "memberName": related.name,
                    "relationship": edge.relationship,
                })
        return result

    @property
    def edge_count(self) -> int:
        """Number of directed entries (two per relationship)."""
        return len(self._records)

    # ─────────────────────────────────────────
    # Snapshots
    # ─────────────────────────────────────────

    @classmethod
    def from_network(cls, network: FamilyNetwork) -> "RelationshipGraph":
        """Rebuild a graph from a stored snapshot."""
        graph = cls()
        for member in network.members:
            graph.add_existing_member(member)
        for record in network.relationships:
            graph._append(record.from_id, record.to_id, record.relationship)
        return graph

    def to_network(self, network: FamilyNetwork) -> FamilyNetwork:
        """Copy of the snapshot with this graph's members and relationships."""
        return network.model_copy(update={
            "members": self.members,
            "relationships": list(self._records),
        })


def _label(relationship) -> str:
    if isinstance(relationship, RelationType):
        return relationship.value
    return relationship
