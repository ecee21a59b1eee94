"""Family network operations on top of a network store."""

import logging
import threading
from typing import Optional

from src.models import FamilyNetwork, Member
from src.graph.models import RelationshipChain
from src.graph.family.errors import NetworkNotFound
from src.graph.family.graph import RelationshipGraph
from src.graph.family.queries import ChainResolver

logger = logging.getLogger(__name__)

CREATOR_LABEL = "Creator"


class FamilyNetworkService:
    """
    Load a network snapshot, mutate or query its graph, save it back.

    Each network has its own lock held around every load-mutate-save and
    load-query, so a chain query never sees half of a reciprocal pair.
    """

    def __init__(self, store):
        self.store = store
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock(self, network_id: str) -> Optional[threading.Lock]:
        """Lock for an existing network, or None if the store has no such network."""
        with self._locks_guard:
            lock = self._locks.get(network_id)
        if lock is not None:
            return lock
        if self.store.get_network(network_id) is None:
            return None
        with self._locks_guard:
            return self._locks.setdefault(network_id, threading.Lock())

    def _existing_lock(self, network_id: str) -> threading.Lock:
        lock = self._lock(network_id)
        if lock is None:
            logger.warning("Family network not found: %s", network_id)
            raise NetworkNotFound(network_id)
        return lock

    def _load(self, network_id: str) -> FamilyNetwork:
        network = self.store.get_network(network_id)
        if network is None:
            raise NetworkNotFound(network_id)
        return network

    # ─────────────────────────────────────────
    # Networks
    # ─────────────────────────────────────────

    def create_network(self, name: str, creator_name: str) -> FamilyNetwork:
        """Create a network whose first member is its creator."""
        network = FamilyNetwork(name=name, creator=creator_name)
        graph = RelationshipGraph()
        graph.add_member(creator_name, relationship=CREATOR_LABEL)
        network = graph.to_network(network)

        with self._locks_guard:
            lock = self._locks.setdefault(network.id, threading.Lock())
        with lock:
            self.store.save_network(network)
        logger.info("Created family network '%s' (%s)", name, network.id)
        return network

    def get_network(self, network_id: str) -> FamilyNetwork:
        """
        Raises:
            NetworkNotFound: if no such network
        """
        with self._existing_lock(network_id):
            return self._load(network_id)

    def list_networks(self) -> list[FamilyNetwork]:
        return self.store.list_networks()

    # ─────────────────────────────────────────
    # Members and relationships
    # ─────────────────────────────────────────

    def add_member(
        self,
        network_id: str,
        name: str,
        related_member_id: Optional[str] = None,
        relationship_type: Optional[str] = None,
        **attributes
    ) -> Member:
        """
        Add a member, optionally related to an existing member.

        The relationship is read from the new member's side: relationship_type
        "child" with related_member_id=X means the new member is X's child.

        Raises:
            NetworkNotFound: if no such network
            MemberNotFound: if related_member_id is not in the network
        """
        with self._existing_lock(network_id):
            network = self._load(network_id)
            graph = RelationshipGraph.from_network(network)
            member = graph.add_member(name, **attributes)
            if related_member_id and relationship_type:
                graph.add_relationship(member.id, related_member_id, relationship_type)
            self.store.save_network(graph.to_network(network))

        logger.info("Added member %s to network %s", member.name, network_id)
        return member

    def add_relationship(self, network_id: str, from_id: str, to_id: str, relationship: str) -> None:
        """
        Raises:
            NetworkNotFound: if no such network
            MemberNotFound: if either member is not in the network
        """
        with self._existing_lock(network_id):
            network = self._load(network_id)
            graph = RelationshipGraph.from_network(network)
            graph.add_relationship(from_id, to_id, relationship)
            self.store.save_network(graph.to_network(network))

    def get_member_relationships(self, network_id: str, member_id: str) -> list[dict]:
        """Relationships of one member; empty for unknown network or member."""
        graph = self._graph_or_none(network_id)
        return graph.member_relationships(member_id) if graph is not None else []

    # ─────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────

    def find_relationship_chain(self, network_id: str, from_id: str, to_id: str) -> RelationshipChain:
        """Shortest chain between two members; empty for unknown network or members."""
        graph = self._graph_or_none(network_id)
        if graph is None:
            graph = RelationshipGraph()
        return ChainResolver(graph).resolve(from_id, to_id)

    def _graph_or_none(self, network_id: str) -> Optional[RelationshipGraph]:
        lock = self._lock(network_id)
        if lock is None:
            return None
        with lock:
            network = self.store.get_network(network_id)
        return RelationshipGraph.from_network(network) if network is not None else None
