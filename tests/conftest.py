from pathlib import Path

import pytest

from genealogy_kinship.graph import FamilyGraph, build_family_graph
from genealogy_kinship.schemas import Person, RelationshipEdge
from genealogy_kinship.storage import GenealogyDatabase
from tests.family_data import COUSINS


@pytest.fixture
def cousin_edges() -> list[RelationshipEdge]:
    return list(COUSINS)


@pytest.fixture
def cousin_people() -> list[Person]:
    return [
        Person(id="mary", name="Mary", gender="F"),
        Person(id="john", name="John", gender="M"),
        Person(id="sue", name="Sue", gender="F"),
        Person(id="alice", name="Alice", gender="F"),
        Person(id="bob", name="Bob", gender="M"),
    ]


@pytest.fixture
def cousin_graph(
    cousin_edges: list[RelationshipEdge], cousin_people: list[Person]
) -> FamilyGraph:
    return build_family_graph(cousin_edges, cousin_people)


@pytest.fixture
def family_db(tmp_path: Path) -> Path:
    """SQLite database holding the cousins family.

    Ids: Mary=1, John=2, Sue=3, Alice=4, Bob=5.
    """
    db_path = tmp_path / "genealogy.db"
    db = GenealogyDatabase(db_path=db_path)

    mary = db.add_person("Mary", gender="F")
    john = db.add_person("John", gender="M")
    sue = db.add_person("Sue", gender="F")
    alice = db.add_person("Alice", gender="F")
    bob = db.add_person("Bob", gender="M")

    db.add_relationship(mary.id, john.id, "parent_child")
    db.add_relationship(mary.id, sue.id, "parent_child")
    db.add_relationship(john.id, alice.id, "parent_child")
    db.add_relationship(sue.id, bob.id, "parent_child")
    db.add_event(mary.id, "birth", date="1930")

    return db_path
