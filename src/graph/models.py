"""Shared data models for graph operations."""

from dataclasses import dataclass, field
from typing import Optional

from src.models import Member


@dataclass(frozen=True)
class Edge:
    """Outgoing typed edge, as seen from the member that owns it."""
    member_id: str
    relationship: str  # parent, child, sibling, spouse, ...


@dataclass
class ChainLink:
    """One step of a relationship chain."""
    member: Member
    relationship: Optional[str] = None  # label towards the next member, None on the last link

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "memberId": self.member.id,
            "memberName": self.member.name,
            "relationshipToNext": self.relationship,
        }


@dataclass
class RelationshipChain:
    """Result of a chain query between two members."""
    path: list[str] = field(default_factory=list)
    links: list[ChainLink] = field(default_factory=list)
    summary: str = ""

    @property
    def found(self) -> bool:
        return bool(self.path)

    def to_dict(self) -> dict:
        return {
            "found": self.found,
            "chain": [link.to_dict() for link in self.links],
            "summary": self.summary,
        }
