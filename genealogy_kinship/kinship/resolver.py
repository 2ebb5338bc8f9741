"""Relationship resolver: how is person B related to person A?

The resolver answers queries against one immutable FamilyGraph. It holds no
mutable state, so one instance can serve concurrent queries.
"""

import logging

from genealogy_kinship.config import settings
from genealogy_kinship.errors import InvalidQuery
from genealogy_kinship.graph import FamilyGraph, Tie
from genealogy_kinship.kinship.classify import classify_affinity, classify_path
from genealogy_kinship.kinship.search import Path, find_path, is_blood_path, shortest_paths
from genealogy_kinship.schemas import Direction, RelationshipResult

logger = logging.getLogger(__name__)


class RelationshipResolver:
    """Resolve relationships between people in a family graph."""

    def __init__(
        self,
        graph: FamilyGraph,
        strict: bool | None = None,
        include_in_law: bool | None = None,
    ):
        """Initialize the resolver.

        Args:
            graph: Family graph to query
            strict: Raise InvalidQuery for people missing from the graph instead
                of answering "unrelated" (default: settings.strict_membership)
            include_in_law: Try relationships through one marriage or
                partnership when no kinship path exists
                (default: settings.include_in_law)
        """
        self.graph = graph
        self.strict = settings.strict_membership if strict is None else strict
        self.include_in_law = settings.include_in_law if include_in_law is None else include_in_law

    def resolve(self, person_a: str, person_b: str) -> RelationshipResult:
        """Work out what person_b is to person_a.

        Args:
            person_a: Person the question is asked from
            person_b: Person whose relationship to person_a is wanted

        Returns:
            RelationshipResult; label "unrelated" when no path exists

        Raises:
            InvalidQuery: If both ids are the same person, or (strict mode
                only) either id is not in the graph
        """
        if person_a == person_b:
            raise InvalidQuery(
                f"Cannot relate person {person_a!r} to themselves", person_a, person_b
            )

        missing = [pid for pid in (person_a, person_b) if pid not in self.graph]
        if missing:
            if self.strict:
                raise InvalidQuery(
                    f"Unknown person(s): {', '.join(missing)}", person_a, person_b
                )
            logger.debug("Not in family graph: %s", ", ".join(missing))
            return RelationshipResult.unrelated(person_a, person_b)

        path = find_path(self.graph, person_a, person_b)
        if path is not None:
            return classify_path(person_a, path)

        if self.include_in_law:
            result = self._resolve_affinity(person_a, person_b)
            if result is not None:
                return result

        return RelationshipResult.unrelated(person_a, person_b)

    def resolve_all(self, person_id: str) -> list[RelationshipResult]:
        """Resolve person_id's relationship to everyone related to them.

        Returns:
            Related people only, ordered by path length then graph order
        """
        if person_id not in self.graph:
            if self.strict:
                raise InvalidQuery(f"Unknown person: {person_id}", person_id)
            return []

        reachable = shortest_paths(self.graph, person_id)
        related = []
        for other in self.graph:
            if other == person_id:
                continue
            if other in reachable:
                related.append(classify_path(person_id, reachable[other]))
            elif self.include_in_law:
                result = self._resolve_affinity(person_id, other, reachable)
                if result is not None:
                    related.append(result)
        related.sort(key=lambda result: result.distance or 0)
        return related

    def _resolve_affinity(
        self, person_a: str, person_b: str, reachable: dict[str, Path] | None = None
    ) -> RelationshipResult | None:
        # Candidates: (edge count, non-blood, discovery order, hop, path, spouse_first)
        candidates: list[tuple[int, bool, int, Tie, Path, bool]] = []

        # The spouse's relatives: person_a -> partner ... person_b
        for hop in self.graph.node(person_a).partners:
            if hop.person_id == person_b:
                path: Path | None = ()
            else:
                path = find_path(self.graph, hop.person_id, person_b)
            if path is not None:
                candidates.append(
                    (len(path) + 1, not is_blood_path(path), len(candidates), hop, path, True)
                )

        # A relative's spouse: person_a ... relative -> person_b
        if reachable is None:
            reachable = shortest_paths(self.graph, person_a)
        for tie in self.graph.node(person_b).partners:
            relative = tie.person_id
            if relative == person_a or relative not in reachable:
                continue
            path = reachable[relative]
            hop = Tie(person_b, tie.kind, Direction.PARTNER)
            candidates.append(
                (len(path) + 1, not is_blood_path(path), len(candidates), hop, path, False)
            )

        if not candidates:
            logger.debug("No affinity path from %s to %s", person_a, person_b)
            return None

        _, _, _, hop, path, spouse_first = min(candidates, key=lambda c: c[:3])
        return classify_affinity(person_a, hop, path, spouse_first)


def resolve(
    graph: FamilyGraph, person_a: str, person_b: str, strict: bool | None = None
) -> RelationshipResult:
    """Work out what person_b is to person_a in the given graph."""
    return RelationshipResolver(graph, strict=strict).resolve(person_a, person_b)


def resolve_all(graph: FamilyGraph, person_id: str) -> list[RelationshipResult]:
    """Resolve a person's relationship to everyone related to them."""
    return RelationshipResolver(graph).resolve_all(person_id)
