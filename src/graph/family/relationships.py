"""Relationship types and their reciprocals."""

from enum import Enum


class RelationType(str, Enum):
    """Known family relationship types."""
    PARENT = "parent"
    CHILD = "child"
    SIBLING = "sibling"
    SPOUSE = "spouse"
    GRANDPARENT = "grandparent"
    GRANDCHILD = "grandchild"
    UNCLE = "uncle"
    NEPHEW = "nephew"
    AUNT = "aunt"
    NIECE = "niece"
    COUSIN = "cousin"


# Gender-specific pairs are fixed: the reciprocal of nephew is always uncle.
RECIPROCALS = {
    RelationType.PARENT: RelationType.CHILD,
    RelationType.CHILD: RelationType.PARENT,
    RelationType.SIBLING: RelationType.SIBLING,
    RelationType.SPOUSE: RelationType.SPOUSE,
    RelationType.GRANDPARENT: RelationType.GRANDCHILD,
    RelationType.GRANDCHILD: RelationType.GRANDPARENT,
    RelationType.UNCLE: RelationType.NEPHEW,
    RelationType.NEPHEW: RelationType.UNCLE,
    RelationType.AUNT: RelationType.NIECE,
    RelationType.NIECE: RelationType.AUNT,
    RelationType.COUSIN: RelationType.COUSIN,
}


def is_known_type(relationship: str) -> bool:
    """Check if relationship is in the reciprocal table."""
    return relationship in RelationType._value2member_map_


def reciprocal(relationship: str) -> str:
    """
    Relationship type as seen from the other endpoint.

    Unknown types are their own reciprocal.
    """
    if is_known_type(relationship):
        return RECIPROCALS[RelationType(relationship)].value
    else:
        return relationship
