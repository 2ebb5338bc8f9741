"""Storage module for people and relationship records."""

from genealogy_kinship.storage.edge_file import FamilyDataset, load_edge_file, parse_dataset
from genealogy_kinship.storage.sqlite import (
    Event,
    GenealogyDatabase,
    Person,
    Relationship,
)

__all__ = [
    "GenealogyDatabase",
    "FamilyDataset",
    "Person",
    "Event",
    "Relationship",
    "load_edge_file",
    "parse_dataset",
]
