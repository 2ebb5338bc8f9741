"""Pydantic schemas for people, relationship records and resolved kinship.

These schemas are the shapes shared with the record-keeping layer: the same
person and relationship records the host application stores are validated
here before a family graph is built from them.
"""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class RelationshipType(str, Enum):
    """Closed set of relationship record types."""

    PARENT_CHILD = "parent_child"
    SPOUSE = "spouse"
    PARTNER = "partner"
    SIBLING = "sibling"
    ADOPTIVE_PARENT = "adoptive_parent"
    STEP_PARENT = "step_parent"
    FOSTER_PARENT = "foster_parent"
    GUARDIAN = "guardian"
    OTHER = "other"


class TieKind(str, Enum):
    """Legal or biological category of a tie or of a resolved relationship."""

    BLOOD = "blood"
    STEP = "step"
    ADOPTIVE = "adoptive"
    FOSTER = "foster"
    GUARDIANSHIP = "guardianship"
    MARRIAGE = "marriage"
    PARTNERSHIP = "partnership"
    # Only used on resolved relationships
    IN_LAW = "in_law"
    MIXED = "mixed"


class Direction(str, Enum):
    """Direction of a single step through the family graph."""

    UP = "up"  # toward a parent
    DOWN = "down"  # toward a child
    LATERAL = "lateral"  # sibling
    PARTNER = "partner"  # spouse or partner


class RelationshipCategory(str, Enum):
    """Broad shape of a resolved relationship."""

    LINEAL = "lineal"
    COLLATERAL = "collateral"
    AFFINITY = "affinity"
    GUARDIANSHIP = "guardianship"
    UNRELATED = "unrelated"


# Parent family record types and the tie each one produces
PARENT_TIE_KINDS: dict[RelationshipType, TieKind] = {
    RelationshipType.PARENT_CHILD: TieKind.BLOOD,
    RelationshipType.ADOPTIVE_PARENT: TieKind.ADOPTIVE,
    RelationshipType.STEP_PARENT: TieKind.STEP,
    RelationshipType.FOSTER_PARENT: TieKind.FOSTER,
    RelationshipType.GUARDIAN: TieKind.GUARDIANSHIP,
}

PARTNER_TIE_KINDS: dict[RelationshipType, TieKind] = {
    RelationshipType.SPOUSE: TieKind.MARRIAGE,
    RelationshipType.PARTNER: TieKind.PARTNERSHIP,
}


def _coerce_identifier(value: Any) -> Any:
    # Database ids are integers, graph ids are strings
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class Person(BaseModel):
    """A person as supplied by the record-keeping layer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(description="Stable person identifier")
    name: str = Field(
        validation_alias=AliasChoices("name", "preferred_name", "primary_name"),
        description="Preferred display name",
    )
    given_names: str | None = None
    family_name: str | None = None
    gender: str | None = Field(default=None, description="Free text, e.g. 'M', 'F', 'female'")
    birth_date: str | None = Field(default=None, description="Date as recorded (not normalized)")
    death_date: str | None = Field(default=None, description="Date as recorded (not normalized)")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return _coerce_identifier(value)

    @property
    def sex(self) -> str | None:
        """Normalized gender: 'male', 'female' or None when unknown."""
        if not self.gender:
            return None
        value = self.gender.strip().lower()
        if value in {"m", "male", "man", "boy"}:
            return "male"
        if value in {"f", "female", "woman", "girl"}:
            return "female"
        return None


class RelationshipEdge(BaseModel):
    """A typed relationship record between two people.

    For the parent family types (``parent_child``, ``adoptive_parent``,
    ``step_parent``, ``foster_parent``, ``guardian``) ``person_a`` is the
    parent or guardian and ``person_b`` the child or ward. ``spouse``,
    ``partner`` and ``sibling`` are symmetric.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    person_a: str = Field(
        validation_alias=AliasChoices("person_a", "person_a_id", "source_person_id")
    )
    person_b: str = Field(
        validation_alias=AliasChoices("person_b", "person_b_id", "target_person_id")
    )
    relationship_type: RelationshipType = Field(
        validation_alias=AliasChoices("relationship_type", "type")
    )

    @field_validator("person_a", "person_b", mode="before")
    @classmethod
    def _coerce_ids(cls, value: Any) -> Any:
        return _coerce_identifier(value)

    @model_validator(mode="after")
    def _reject_self_reference(self) -> "RelationshipEdge":
        if self.person_a == self.person_b:
            raise ValueError(f"person {self.person_a!r} cannot be related to themselves")
        return self

    @property
    def is_parental(self) -> bool:
        """Whether person_a is a parent, step/adoptive/foster parent or guardian of person_b."""
        return self.relationship_type in PARENT_TIE_KINDS


class PathStep(BaseModel):
    """One edge of a resolved path: the person reached and how."""

    model_config = ConfigDict(frozen=True)

    person_id: str
    tie_kind: TieKind
    direction: Direction


class RelationshipResult(BaseModel):
    """How ``person_b`` is related to ``person_a``.

    ``label`` names what person_b is to person_a, e.g. ``grandparent`` means
    person_b is person_a's grandparent.
    """

    model_config = ConfigDict(frozen=True)

    person_a: str
    person_b: str
    label: str = Field(description="Relationship label, e.g. 'first_cousin', 'step_sibling'")
    degree: int | None = Field(
        default=None,
        description="Cousin degree for cousins, path edge count otherwise; None when unrelated",
    )
    removal: int | None = Field(default=None, description="Generational gap between cousins")
    tie_kind: TieKind | None = None
    category: RelationshipCategory = RelationshipCategory.UNRELATED
    ascent: int = Field(default=0, description="Generations up to the common ancestor")
    descent: int = Field(default=0, description="Generations down from the common ancestor")
    distance: int | None = Field(default=None, description="Number of edges in the chosen path")
    path: list[str] = Field(
        default_factory=list, description="Person ids from person_a to person_b"
    )
    steps: list[PathStep] = Field(default_factory=list)

    @classmethod
    def unrelated(cls, person_a: str, person_b: str) -> "RelationshipResult":
        """Build the result for two people with no connecting path."""
        return cls(person_a=person_a, person_b=person_b, label="unrelated")

    @property
    def is_related(self) -> bool:
        """Check if any path was found."""
        return self.category != RelationshipCategory.UNRELATED
