"""Pydantic schemas for people, relationship records and kinship results."""

from genealogy_kinship.schemas.kinship import (
    PARENT_TIE_KINDS,
    PARTNER_TIE_KINDS,
    Direction,
    PathStep,
    Person,
    RelationshipCategory,
    RelationshipEdge,
    RelationshipResult,
    RelationshipType,
    TieKind,
)

__all__ = [
    "Person",
    "RelationshipEdge",
    "RelationshipType",
    "RelationshipResult",
    "RelationshipCategory",
    "PathStep",
    "TieKind",
    "Direction",
    "PARENT_TIE_KINDS",
    "PARTNER_TIE_KINDS",
]
