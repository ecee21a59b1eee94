"""Relationship chain queries."""

import logging
from collections import deque
from typing import Optional

from src.graph.models import ChainLink, RelationshipChain
from src.graph.family.graph import RelationshipGraph

logger = logging.getLogger(__name__)

UNKNOWN_RELATIONSHIP = "related to"


class ChainResolver:
    """Shortest relationship chain between two members. Never mutates the graph."""

    def __init__(self, graph: RelationshipGraph):
        self.graph = graph

    def find_shortest_chain(self, start_id: str, end_id: str) -> list[str]:
        """
        Breadth-first search from start to end.

        Neighbours are expanded in adjacency insertion order, so among equally
        short paths the first discovered one wins.

        Returns:
            Member ids from start to end, [start] when both are the same
            member, or [] when either is unknown or they are not connected.
        """
        path, _ = self._search(start_id, end_id)
        return path

    def _search(self, start_id: str, end_id: str) -> tuple[list[str], list[str]]:
        """Path of member ids and the labels of the edges taken between them."""
        if start_id not in self.graph or end_id not in self.graph:
            return [], []
        if start_id == end_id:
            return [start_id], []

        # member -> (previous member, label of the edge previous -> member)
        came_from = {start_id: None}
        queue = deque([start_id])

        while queue:
            current = queue.popleft()
            if current == end_id:
                return self._reconstruct(came_from, end_id)

            for edge in self.graph.neighbors(current):
                if edge.member_id not in came_from:
                    came_from[edge.member_id] = (current, edge.relationship)
                    queue.append(edge.member_id)

        logger.debug("No chain between %s and %s", start_id, end_id)
        return [], []

    def _reconstruct(self, came_from: dict, end_id: str) -> tuple[list[str], list[str]]:
        path, labels = [end_id], []
        step = came_from[end_id]
        while step is not None:
            previous, relationship = step
            path.append(previous)
            labels.append(relationship)
            step = came_from[previous]
        path.reverse()
        labels.reverse()
        return path, labels

    def describe_chain(self, path: list[str], labels: Optional[list[str]] = None) -> list[ChainLink]:
        """
        Pair each member on the path with its relationship to the next one.

        labels, when given, are the relationships of the edges actually
        traversed; otherwise they are looked up per pair.
        """
        links = []
        for i, member_id in enumerate(path):
            member = self.graph.get_member(member_id)
            if member is None:
                return []
            relationship = None
            if i < len(path) - 1:
                relationship = self._label(path, i, labels)
            links.append(ChainLink(member=member, relationship=relationship))
        return links

    def summarize(self, path: list[str], labels: Optional[list[str]] = None) -> str:
        """Human-readable summary of a chain."""
        if not path:
            return "No relationship found."
        if len(path) == 1:
            return "Same person."
        if len(path) == 2:
            return self._label(path, 0, labels)
        if len(path) == 3:
            return f"{self._label(path, 0, labels)}'s {self._label(path, 1, labels)}"
        return f"Connected through {len(path) - 2} intermediate family member(s)"

    def _label(self, path: list[str], i: int, labels: Optional[list[str]]) -> str:
        if labels and i < len(labels):
            return labels[i]
        return self.graph.relationship_between(path[i], path[i + 1]) or UNKNOWN_RELATIONSHIP

    def resolve(self, start_id: str, end_id: str) -> RelationshipChain:
        """Find, describe and summarize the chain between two members."""
        path, labels = self._search(start_id, end_id)
        logger.debug("Chain %s -> %s: %s", start_id, end_id, path)
        return RelationshipChain(
            path=path,
            links=self.describe_chain(path, labels),
            summary=self.summarize(path, labels),
        )
