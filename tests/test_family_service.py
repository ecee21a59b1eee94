"""Tests for the family network service."""

import threading

import pytest

from src.graph.family import FamilyNetworkService, MemberNotFound, NetworkNotFound
from src.graph.family.graph import RelationshipGraph
from src.graph.network_store import InMemoryNetworkStore, SQLiteNetworkStore


@pytest.fixture
def service():
    return FamilyNetworkService(InMemoryNetworkStore())


@pytest.fixture
def network(service):
    return service.create_network("Mattegunta", "Ramesh")


class TestNetworks:
    """Test network creation and lookup."""

    def test_creator_is_first_member(self, service, network):
        assert network.name == "Mattegunta"
        assert network.creator == "Ramesh"
        assert [m.name for m in network.members] == ["Ramesh"]
        assert network.members[0].relationship == "Creator"

    def test_get_network(self, service, network):
        assert service.get_network(network.id).id == network.id

    def test_unknown_network(self, service):
        with pytest.raises(NetworkNotFound):
            service.get_network("nope")

    def test_networks_are_separate(self, service, network):
        other = service.create_network("Sharma", "Vijay")
        service.add_member(other.id, "Meena")
        assert len(service.get_network(network.id).members) == 1
        assert len(service.list_networks()) == 2


class TestMembersAndRelationships:
    """Test mutations through the service."""

    def test_add_member_persists(self, service, network):
        member = service.add_member(network.id, "Padma", phone="555-0100")
        saved = service.get_network(network.id)
        assert saved.members[-1].id == member.id
        assert saved.members[-1].phone == "555-0100"

    def test_add_member_with_relationship(self, service, network):
        ramesh = network.members[0]
        kiran = service.add_member(network.id, "Kiran", related_member_id=ramesh.id, relationship_type="child")

        rels = service.get_member_relationships(network.id, ramesh.id)
        assert rels == [{"memberId": kiran.id, "memberName": "Kiran", "relationship": "parent"}]

    def test_add_member_with_card_label(self, service, network):
        """Card label and relationship type are separate fields."""
        ramesh = network.members[0]
        padma = service.add_member(network.id, "Padma", related_member_id=ramesh.id,
                                   relationship_type="spouse", relationship="Wife")

        saved = service.get_network(network.id).members[-1]
        assert saved.id == padma.id
        assert saved.relationship == "Wife"
        graph = RelationshipGraph.from_network(service.get_network(network.id))
        assert graph.relationship_between(padma.id, ramesh.id) == "spouse"

    def test_add_member_unknown_related_member(self, service, network):
        with pytest.raises(MemberNotFound):
            service.add_member(network.id, "Kiran", related_member_id="nobody", relationship_type="child")
        assert len(service.get_network(network.id).members) == 1

    def test_add_relationship(self, service, network):
        ramesh = network.members[0]
        padma = service.add_member(network.id, "Padma")
        service.add_relationship(network.id, ramesh.id, padma.id, "spouse")

        graph = RelationshipGraph.from_network(service.get_network(network.id))
        assert graph.relationship_between(padma.id, ramesh.id) == "spouse"

    def test_add_relationship_errors(self, service, network):
        ramesh = network.members[0]
        with pytest.raises(NetworkNotFound):
            service.add_relationship("nope", ramesh.id, ramesh.id, "sibling")
        with pytest.raises(MemberNotFound):
            service.add_relationship(network.id, ramesh.id, "nobody", "sibling")

    def test_member_relationships_unknown(self, service, network):
        assert service.get_member_relationships("nope", "x") == []
        assert service.get_member_relationships(network.id, "x") == []


class TestRelationshipChain:
    """Test chain queries through the service."""

    def test_chain(self, service, network):
        ramesh = network.members[0]
        kiran = service.add_member(network.id, "Kiran", related_member_id=ramesh.id, relationship_type="child")
        anita = service.add_member(network.id, "Anita", related_member_id=kiran.id, relationship_type="sibling")

        chain = service.find_relationship_chain(network.id, ramesh.id, anita.id)
        assert chain.path == [ramesh.id, kiran.id, anita.id]
        assert chain.summary == "parent's sibling"

    def test_same_person(self, service, network):
        ramesh = network.members[0]
        chain = service.find_relationship_chain(network.id, ramesh.id, ramesh.id)
        assert chain.path == [ramesh.id]
        assert chain.summary == "Same person."

    def test_unknown_inputs_give_empty_chain(self, service, network):
        ramesh = network.members[0]
        assert service.find_relationship_chain("nope", ramesh.id, ramesh.id).path == []
        assert service.find_relationship_chain(network.id, ramesh.id, "nobody").path == []

    def test_sqlite_backed(self, tmp_path):
        service = FamilyNetworkService(SQLiteNetworkStore(db_path=str(tmp_path / "networks.db")))
        network = service.create_network("Mattegunta", "Ramesh")
        ramesh = network.members[0]
        padma = service.add_member(network.id, "Padma", related_member_id=ramesh.id, relationship_type="spouse")

        chain = service.find_relationship_chain(network.id, padma.id, ramesh.id)
        assert chain.summary == "spouse"


class TestConcurrency:
    """Concurrent writers on one network."""

    def test_parallel_relationships_are_all_kept(self, service, network):
        ramesh = network.members[0]
        others = [service.add_member(network.id, f"Child {i}") for i in range(20)]

        threads = [
            threading.Thread(target=service.add_relationship, args=(network.id, ramesh.id, m.id, "parent"))
            for m in others
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        graph = RelationshipGraph.from_network(service.get_network(network.id))
        assert len(graph.neighbors(ramesh.id)) == 20
        for m in others:
            assert graph.neighbors(m.id)[0].relationship == "child"


class TestLocks:
    """Locks are only handed out for networks that exist."""

    def test_unknown_network_lookups_do_not_create_locks(self, service, network):
        for i in range(100):
            service.find_relationship_chain(f"unknown-{i}", "a", "b")
            service.get_member_relationships(f"unknown-{i}", "a")
            with pytest.raises(NetworkNotFound):
                service.get_network(f"unknown-{i}")
            with pytest.raises(NetworkNotFound):
                service.add_relationship(f"unknown-{i}", "a", "b", "sibling")
        assert list(service._locks) == [network.id]

    def test_lock_created_for_stored_network(self, tmp_path):
        """A network saved by an earlier service still gets a lock."""
        db_path = str(tmp_path / "networks.db")
        network = FamilyNetworkService(SQLiteNetworkStore(db_path=db_path)).create_network("Mattegunta", "Ramesh")

        service = FamilyNetworkService(SQLiteNetworkStore(db_path=db_path))
        assert service.get_network(network.id).name == "Mattegunta"
        assert list(service._locks) == [network.id]
