"""Tests for family graph construction."""

import dataclasses

import pytest

from genealogy_kinship.graph import (
    FamilyGraph,
    FamilyGraphBuilder,
    Tie,
    build_family_graph,
)
from genealogy_kinship.schemas import Direction, Person, RelationshipEdge, TieKind
from tests.family_data import edge


def test_parent_child_ties(cousin_graph: FamilyGraph) -> None:
    """Test that a parent_child record links both people."""
    mary = cousin_graph.node("mary")
    john = cousin_graph.node("john")

    assert Tie("john", TieKind.BLOOD, Direction.DOWN) in mary.children
    assert john.parents == (Tie("mary", TieKind.BLOOD, Direction.UP),)
    assert john.blood_parents == john.parents


@pytest.mark.parametrize(
    ("relationship_type", "kind"),
    [
        ("parent_child", TieKind.BLOOD),
        ("adoptive_parent", TieKind.ADOPTIVE),
        ("step_parent", TieKind.STEP),
        ("foster_parent", TieKind.FOSTER),
        ("guardian", TieKind.GUARDIANSHIP),
    ],
)
def test_parent_family_kinds(relationship_type: str, kind: TieKind) -> None:
    """Test that each parent family type produces the matching tie kind."""
    graph = build_family_graph([edge("p", "c", relationship_type)])

    assert graph.ties("p") == (Tie("c", kind, Direction.DOWN),)
    assert graph.ties("c") == (Tie("p", kind, Direction.UP),)


def test_kind_specific_views() -> None:
    graph = build_family_graph(
        [
            edge("stan", "kid", "step_parent"),
            edge("ada", "kid", "adoptive_parent"),
            edge("fay", "kid", "foster_parent"),
            edge("gus", "kid", "guardian"),
        ]
    )
    kid = graph.node("kid")

    assert [t.person_id for t in kid.step_parents] == ["stan"]
    assert [t.person_id for t in kid.adoptive_parents] == ["ada"]
    assert [t.person_id for t in kid.foster_parents] == ["fay"]
    assert [t.person_id for t in kid.guardians] == ["gus"]
    assert kid.blood_parents == ()
    assert len(kid.parents) == 4
    assert [t.person_id for t in graph.node("gus").wards] == ["kid"]


def test_symmetric_types() -> None:
    graph = build_family_graph(
        [edge("h", "w", "spouse"), edge("x", "y", "partner"), edge("s1", "s2", "sibling")]
    )

    assert graph.node("w").partners == (Tie("h", TieKind.MARRIAGE, Direction.PARTNER),)
    assert graph.node("x").partners == (Tie("y", TieKind.PARTNERSHIP, Direction.PARTNER),)
    assert graph.node("s2").siblings == (Tie("s1", TieKind.BLOOD, Direction.LATERAL),)


def test_duplicate_records_are_idempotent() -> None:
    """Test that repeated and mirrored records add no extra ties."""
    once = build_family_graph([edge("a", "b"), edge("a", "s", "sibling")])
    repeated = build_family_graph(
        [edge("a", "b"), edge("a", "b"), edge("a", "s", "sibling"), edge("s", "a", "sibling")]
    )

    assert dict(once.nodes) == dict(repeated.nodes)
    assert repeated.tie_count == 4


def test_conflicting_types_are_preserved() -> None:
    """Test that different record types between the same pair all survive."""
    graph = build_family_graph(
        [edge("p", "c", "step_parent"), edge("p", "c", "adoptive_parent")]
    )

    assert [tie.kind for tie in graph.node("c").parents] == [TieKind.STEP, TieKind.ADOPTIVE]


def test_other_type_is_not_traversable() -> None:
    graph = build_family_graph([edge("a", "b", "other")])

    assert "a" in graph
    assert "b" in graph
    assert graph.tie_count == 0


def test_neighbour_order_follows_insertion() -> None:
    graph = build_family_graph([edge("m", "x"), edge("f", "x"), edge("x", "k")])

    assert [tie.person_id for tie in graph.ties("x")] == ["m", "f", "k"]


def test_isolated_people_become_nodes() -> None:
    graph = build_family_graph([edge("a", "b")], [Person(id="loner", name="Lone")])

    assert "loner" in graph
    assert graph.ties("loner") == ()
    assert graph.person("loner").name == "Lone"
    assert len(graph) == 3


def test_unknown_people() -> None:
    graph = build_family_graph([edge("a", "b")])

    assert graph.ties("nobody") == ()
    assert graph.person("nobody") is None
    with pytest.raises(KeyError):
        graph.node("nobody")


def test_graph_is_read_only(cousin_graph: FamilyGraph) -> None:
    """Test that a built graph cannot be changed."""
    with pytest.raises(TypeError):
        cousin_graph.nodes["new"] = cousin_graph.node("mary")  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        cousin_graph.node("mary").ties = ()  # type: ignore[misc]


def test_builder_is_incremental(cousin_edges: list[RelationshipEdge]) -> None:
    builder = FamilyGraphBuilder()
    builder.add_all(cousin_edges[:2])
    first = builder.build()
    builder.add_all(cousin_edges[2:])
    second = builder.build()

    assert "alice" not in first
    assert list(second) == ["mary", "john", "sue", "alice", "bob"]
