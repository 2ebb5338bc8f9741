"""Kinship resolution: path search, classification and description."""

from genealogy_kinship.kinship.classify import classify_affinity, classify_path, kinship_label
from genealogy_kinship.kinship.describe import (
    describe_relationship,
    describe_term,
    explain_path,
    relationship_term,
)
from genealogy_kinship.kinship.resolver import RelationshipResolver, resolve, resolve_all
from genealogy_kinship.kinship.search import find_path, shortest_paths

__all__ = [
    "RelationshipResolver",
    "resolve",
    "resolve_all",
    "find_path",
    "shortest_paths",
    "classify_path",
    "classify_affinity",
    "kinship_label",
    "describe_relationship",
    "describe_term",
    "explain_path",
    "relationship_term",
]
