"""Tests for plain-language relationship descriptions."""

import pytest

from genealogy_kinship.graph import FamilyGraph, build_family_graph
from genealogy_kinship.kinship import (
    describe_relationship,
    describe_term,
    explain_path,
    relationship_term,
    resolve,
)
from genealogy_kinship.kinship.describe import number_word, removal_phrase
from genealogy_kinship.schemas import Person, RelationshipResult
from tests.family_data import edge


@pytest.mark.parametrize(
    ("label", "removal", "sex", "term"),
    [
        ("parent", None, "female", "mother"),
        ("child", None, "male", "son"),
        ("grandchild", None, None, "grandchild"),
        ("great_great_grandparent", None, "male", "great-great-grandfather"),
        ("step_grandparent", None, "female", "step-grandmother"),
        ("step_child", None, "male", "step-son"),
        ("adoptive_grandparent", None, None, "adoptive grandparent"),
        ("foster_child", None, "female", "foster daughter"),
        ("aunt_uncle", None, None, "aunt/uncle"),
        ("great_aunt_uncle", None, "female", "great-aunt"),
        ("niece_nephew", None, "male", "nephew"),
        ("sibling_in_law", None, "male", "brother-in-law"),
        ("parent_in_law", None, "female", "mother-in-law"),
        ("spouse", None, "female", "wife"),
        ("first_cousin", 0, None, "first cousin"),
        ("first_cousin", 1, "male", "first cousin once removed"),
        ("second_cousin", 4, None, "second cousin four times removed"),
        ("first_cousin_in_law", 0, None, "first cousin-in-law"),
        ("guardianship_relative", None, None, "guardianship relative"),
    ],
)
def test_relationship_term(label: str, removal: int | None, sex: str | None, term: str) -> None:
    assert relationship_term(label, removal, sex) == term


def test_removal_phrase() -> None:
    assert removal_phrase(None) == ""
    assert removal_phrase(0) == ""
    assert removal_phrase(2) == "twice removed"
    assert removal_phrase(3) == "three times removed"
    assert removal_phrase(21) == "twenty-one times removed"


@pytest.mark.parametrize(
    ("n", "word"),
    [(0, "zero"), (7, "seven"), (13, "thirteen"), (40, "forty"), (99, "ninety-nine"),
     (105, "one hundred five"), (1200, "one thousand two hundred")],
)
def test_number_word(n: int, word: str) -> None:
    assert number_word(n) == word


def test_describe_cousins(cousin_graph: FamilyGraph, cousin_people: list[Person]) -> None:
    people = {person.id: person for person in cousin_people}
    result = resolve(cousin_graph, "alice", "bob")

    sentence = describe_relationship(people["alice"], people["bob"], result)

    assert sentence == "Bob is Alice's first cousin"


def test_describe_uses_gender_of_person_b(
    cousin_graph: FamilyGraph, cousin_people: list[Person]
) -> None:
    people = {person.id: person for person in cousin_people}

    mother = describe_relationship(
        people["john"], people["mary"], resolve(cousin_graph, "john", "mary")
    )
    son = describe_relationship(
        people["mary"], people["john"], resolve(cousin_graph, "mary", "john")
    )

    assert mother == "Mary is John's mother"
    assert son == "John is Mary's son"


def test_describe_unrelated() -> None:
    result = RelationshipResult.unrelated("alice", "zed")
    sentence = describe_relationship(
        Person(id="alice", name="Alice"), Person(id="zed", name="Zed"), result
    )
    assert sentence == "Alice and Zed are not related"


def test_possessive_of_name_ending_in_s() -> None:
    graph = build_family_graph([edge("james", "tom")])
    sentence = describe_relationship(
        Person(id="james", name="James"),
        Person(id="tom", name="Tom", gender="M"),
        resolve(graph, "james", "tom"),
    )
    assert sentence == "Tom is James' son"


def test_guardianship_is_described_as_a_chain() -> None:
    """Test that guardianship paths are never phrased in blood terms."""
    graph = build_family_graph([edge("g", "w", "guardian"), edge("g", "c")])
    result = resolve(graph, "w", "c")

    assert describe_term(result, "male") == "guardian's son"
    sentence = describe_relationship(
        Person(id="w", name="Wendy"), Person(id="c", name="Carl", gender="M"), result
    )
    assert sentence == "Carl is Wendy's guardian's son"


def test_explain_path(cousin_graph: FamilyGraph, cousin_people: list[Person]) -> None:
    people = {person.id: person for person in cousin_people}
    result = resolve(cousin_graph, "alice", "bob")

    assert explain_path(result, people) == (
        "Alice -> parent John -> parent Mary -> child Sue -> child Bob"
    )


def test_explain_path_without_people() -> None:
    graph = build_family_graph([edge("h", "w", "spouse"), edge("wm", "w")])

    assert explain_path(resolve(graph, "h", "wm")) == "h -> spouse w -> parent wm"
    assert explain_path(RelationshipResult.unrelated("a", "b")) == ""
