"""Build an immutable family graph from typed relationship records.

Every relationship record becomes one or two typed ties on the nodes of the
people it connects. The resulting graph is read-only and can be shared by
any number of concurrent relationship queries.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from genealogy_kinship.errors import InvalidEdge
from genealogy_kinship.schemas import (
    PARENT_TIE_KINDS,
    PARTNER_TIE_KINDS,
    Direction,
    Person,
    RelationshipEdge,
    RelationshipType,
    TieKind,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tie:
    """A typed pointer from one person to a neighbour."""

    person_id: str
    kind: TieKind
    direction: Direction


@dataclass(frozen=True)
class PersonNode:
    """All ties of one person, in the order they were recorded."""

    person_id: str
    ties: tuple[Tie, ...] = ()

    def _select(self, direction: Direction, kind: TieKind | None = None) -> tuple[Tie, ...]:
        return tuple(
            tie
            for tie in self.ties
            if tie.direction == direction and (kind is None or tie.kind == kind)
        )

    @property
    def parents(self) -> tuple[Tie, ...]:
        """Every parent-like tie: blood, step, adoptive, foster and guardians."""
        return self._select(Direction.UP)

    @property
    def children(self) -> tuple[Tie, ...]:
        """Every child-like tie: blood, step, adoptive, foster and wards."""
        return self._select(Direction.DOWN)

    @property
    def partners(self) -> tuple[Tie, ...]:
        return self._select(Direction.PARTNER)

    @property
    def siblings(self) -> tuple[Tie, ...]:
        return self._select(Direction.LATERAL)

    @property
    def blood_parents(self) -> tuple[Tie, ...]:
        return self._select(Direction.UP, TieKind.BLOOD)

    @property
    def blood_children(self) -> tuple[Tie, ...]:
        return self._select(Direction.DOWN, TieKind.BLOOD)

    @property
    def step_parents(self) -> tuple[Tie, ...]:
        return self._select(Direction.UP, TieKind.STEP)

    @property
    def step_children(self) -> tuple[Tie, ...]:
        return self._select(Direction.DOWN, TieKind.STEP)

    @property
    def adoptive_parents(self) -> tuple[Tie, ...]:
        return self._select(Direction.UP, TieKind.ADOPTIVE)

    @property
    def adoptive_children(self) -> tuple[Tie, ...]:
        return self._select(Direction.DOWN, TieKind.ADOPTIVE)

    @property
    def foster_parents(self) -> tuple[Tie, ...]:
        return self._select(Direction.UP, TieKind.FOSTER)

    @property
    def foster_children(self) -> tuple[Tie, ...]:
        return self._select(Direction.DOWN, TieKind.FOSTER)

    @property
    def guardians(self) -> tuple[Tie, ...]:
        return self._select(Direction.UP, TieKind.GUARDIANSHIP)

    @property
    def wards(self) -> tuple[Tie, ...]:
        return self._select(Direction.DOWN, TieKind.GUARDIANSHIP)


class FamilyGraph:
    """Read-only family graph keyed by person identifier.

    Usage:
        graph = build_family_graph(edges)
        for tie in graph.node("alice").parents:
            ...
    """

    def __init__(self, nodes: Mapping[str, PersonNode], people: Mapping[str, Person] | None = None):
        self._nodes = MappingProxyType(dict(nodes))
        self._people = MappingProxyType(dict(people or {}))

    def __contains__(self, person_id: object) -> bool:
        return person_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"<FamilyGraph(people={len(self)}, ties={self.tie_count})>"

    @property
    def nodes(self) -> Mapping[str, PersonNode]:
        return self._nodes

    @property
    def people(self) -> Mapping[str, Person]:
        """Person records supplied to the builder, keyed by id."""
        return self._people

    @property
    def tie_count(self) -> int:
        return sum(len(node.ties) for node in self._nodes.values())

    def node(self, person_id: str) -> PersonNode:
        """Get the node for a person.

        Raises:
            KeyError: If the person does not appear in the graph
        """
        return self._nodes[person_id]

    def ties(self, person_id: str) -> tuple[Tie, ...]:
        """Get a person's ties, or an empty tuple for unknown people."""
        node = self._nodes.get(person_id)
        return node.ties if node else ()

    def person(self, person_id: str) -> Person | None:
        return self._people.get(person_id)


class FamilyGraphBuilder:
    """Accumulates relationship records and produces a FamilyGraph."""

    def __init__(self) -> None:
        self._ties: dict[str, list[Tie]] = {}
        self._seen: dict[str, set[Tie]] = {}
        self._people: dict[str, Person] = {}
        self._duplicates = 0

    def add_person(self, person: Person) -> None:
        """Register a person, with or without relationships."""
        self._people[person.id] = person
        self._ensure_node(person.id)

    def add(self, edge: RelationshipEdge) -> None:
        """Record one relationship edge as typed ties on both people."""
        a, b = edge.person_a, edge.person_b
        self._ensure_node(a)
        self._ensure_node(b)

        rel_type = edge.relationship_type
        if rel_type in PARENT_TIE_KINDS:
            kind = PARENT_TIE_KINDS[rel_type]
            self._record(a, Tie(b, kind, Direction.DOWN))
            self._record(b, Tie(a, kind, Direction.UP))
        elif rel_type in PARTNER_TIE_KINDS:
            kind = PARTNER_TIE_KINDS[rel_type]
            self._record(a, Tie(b, kind, Direction.PARTNER))
            self._record(b, Tie(a, kind, Direction.PARTNER))
        elif rel_type == RelationshipType.SIBLING:
            self._record(a, Tie(b, TieKind.BLOOD, Direction.LATERAL))
            self._record(b, Tie(a, TieKind.BLOOD, Direction.LATERAL))
        else:
            logger.debug("Ignoring untraversable %s relationship %s -> %s", rel_type.value, a, b)

    def add_all(self, edges: Iterable[RelationshipEdge]) -> "FamilyGraphBuilder":
        for edge in edges:
            self.add(edge)
        return self

    def build(self) -> FamilyGraph:
        """Freeze the accumulated ties into a FamilyGraph."""
        nodes = {
            person_id: PersonNode(person_id=person_id, ties=tuple(ties))
            for person_id, ties in self._ties.items()
        }
        graph = FamilyGraph(nodes, self._people)
        logger.debug(
            "Built family graph with %d people and %d ties (%d duplicate ties skipped)",
            len(graph),
            graph.tie_count,
            self._duplicates,
        )
        return graph

    def _ensure_node(self, person_id: str) -> None:
        if person_id not in self._ties:
            self._ties[person_id] = []
            self._seen[person_id] = set()

    def _record(self, person_id: str, tie: Tie) -> None:
        if tie in self._seen[person_id]:
            self._duplicates += 1
            return
        self._seen[person_id].add(tie)
        self._ties[person_id].append(tie)


def validate_edges(
    records: Iterable[RelationshipEdge | Mapping[str, Any]],
) -> list[RelationshipEdge]:
    """Validate raw relationship records before graph construction.

    Args:
        records: RelationshipEdge objects or mappings with person_a, person_b
            and relationship_type keys (host column names are accepted too)

    Returns:
        List of validated RelationshipEdge objects, in input order

    Raises:
        InvalidEdge: If a record has an unknown type, references the same
            person twice or is missing an endpoint
    """
    edges = []
    for index, record in enumerate(records):
        if isinstance(record, RelationshipEdge):
            edges.append(record)
            continue
        try:
            edges.append(RelationshipEdge.model_validate(record))
        except ValidationError as e:
            reasons = "; ".join(error["msg"] for error in e.errors())
            raise InvalidEdge(reasons, index=index) from e
    return edges


def build_family_graph(
    edges: Iterable[RelationshipEdge], people: Iterable[Person] | None = None
) -> FamilyGraph:
    """Build a family graph from validated relationship edges.

    Args:
        edges: Relationship edges, already validated
        people: Optional person records; people without any relationship
            still become (isolated) nodes

    Returns:
        Immutable FamilyGraph
    """
    builder = FamilyGraphBuilder()
    for person in people or ():
        builder.add_person(person)
    return builder.add_all(edges).build()
