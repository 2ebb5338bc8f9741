"""Family datasets: people plus relationship edges, from a JSON file or a database.

An edge file looks like::

    {
        "people": [{"id": "mary", "name": "Mary", "gender": "F"}, ...],
        "relationships": [
            {"person_a": "mary", "person_b": "john", "relationship_type": "parent_child"},
            ...
        ]
    }
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, ValidationError

from genealogy_kinship.errors import KinshipError
from genealogy_kinship.graph import FamilyGraph, build_family_graph, validate_edges
from genealogy_kinship.schemas import Person, RelationshipEdge


class FamilyDataset(BaseModel):
    """Everything needed to build one family graph."""

    people: list[Person] = Field(default_factory=list)
    relationships: list[RelationshipEdge] = Field(default_factory=list)

    _people_index: dict[str, Person] | None = PrivateAttr(default=None)

    def build_graph(self) -> FamilyGraph:
        """Build the family graph for this dataset."""
        return build_family_graph(self.relationships, self.people)

    def people_by_id(self) -> dict[str, Person]:
        if self._people_index is None:
            self._people_index = {person.id: person for person in self.people}
        return self._people_index

    def get_person(self, person_id: str) -> Person:
        """Get a person record, or a placeholder named after the id."""
        person = self.people_by_id().get(person_id)
        if person is None:
            return Person(id=person_id, name=person_id)
        return person


def _records(data: dict[str, Any], key: str) -> list[Any]:
    records = data.get(key, [])
    if not isinstance(records, list):
        raise KinshipError(f"'{key}' must be a list, got {type(records).__name__}")
    return records


def parse_dataset(data: dict[str, Any]) -> FamilyDataset:
    """Validate a raw dataset mapping.

    Raises:
        InvalidEdge: If a relationship record is malformed
        KinshipError: If a person record is malformed or either section is
            not a list
    """
    relationships = validate_edges(_records(data, "relationships"))
    try:
        people = [Person.model_validate(record) for record in _records(data, "people")]
    except ValidationError as e:
        raise KinshipError(f"Invalid person record: {e}") from e
    return FamilyDataset(people=people, relationships=relationships)


def load_edge_file(path: Path) -> FamilyDataset:
    """Load people and relationships from a JSON edge file.

    Args:
        path: Path to the JSON file

    Returns:
        Validated FamilyDataset

    Raises:
        KinshipError: If the file is not UTF-8 JSON or has the wrong shape
        InvalidEdge: If a relationship record is malformed
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise KinshipError(f"{path} is not valid UTF-8 JSON: {e}") from e

    # A bare list is treated as relationships only
    if isinstance(data, list):
        data = {"relationships": data}
    if not isinstance(data, dict):
        raise KinshipError(f"{path} must contain a JSON object or list")

    return parse_dataset(data)
