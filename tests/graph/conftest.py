"""Pytest fixtures for graph tests."""

import pytest
from src.graph.family.graph import RelationshipGraph
from src.graph.family.queries import ChainResolver


@pytest.fixture
def graph():
    """Empty RelationshipGraph."""
    return RelationshipGraph()


@pytest.fixture
def family(graph):
    """
    Small family:

        Ramesh -spouse- Padma
        Ramesh -parent-> Kiran, Padma -parent-> Kiran
        Kiran -sibling- Anita
        Anita -parent-> Ravi
        Suresh (no relationships)
    """
    people = {name: graph.add_member(name) for name in ["Ramesh", "Padma", "Kiran", "Anita", "Ravi", "Suresh"]}
    graph.add_relationship(people["Ramesh"].id, people["Padma"].id, "spouse")
    graph.add_relationship(people["Ramesh"].id, people["Kiran"].id, "parent")
    graph.add_relationship(people["Padma"].id, people["Kiran"].id, "parent")
    graph.add_relationship(people["Kiran"].id, people["Anita"].id, "sibling")
    graph.add_relationship(people["Anita"].id, people["Ravi"].id, "parent")
    return people


@pytest.fixture
def resolver(graph):
    """ChainResolver over the graph fixture."""
    return ChainResolver(graph)
