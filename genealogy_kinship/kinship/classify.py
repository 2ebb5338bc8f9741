"""Classify a kinship path into a named relationship.

A path is reduced to two generation counts: steps up to the common ancestor
and steps down from it (a sibling step at the turn counts as one of each).
The counts decide the relationship name; the tie kinds along the path decide
whether it is a blood, step, adoptive, foster, guardianship or mixed
relationship.
"""

from collections.abc import Sequence

from genealogy_kinship.graph import Tie
from genealogy_kinship.schemas import (
    Direction,
    PathStep,
    RelationshipCategory,
    RelationshipResult,
    TieKind,
)

ORDINALS = [
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
    "tenth",
]

# Display precedence when a path mixes several legal kinds
LEGAL_KINDS = (TieKind.STEP, TieKind.ADOPTIVE, TieKind.FOSTER)


def ordinal(n: int) -> str:
    """Ordinal word for cousin degrees: 1 -> 'first', 11 -> '11th', 22 -> '22nd'."""
    if 1 <= n <= len(ORDINALS):
        return ORDINALS[n - 1]
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def generations(path: Sequence[Tie]) -> tuple[int, int]:
    """Count generations up to and down from the common ancestor.

    A run of sibling steps counts once. At the turning point of the path it
    is one generation up plus one down; right after a down step or right
    before an up step it adds nothing (a descendant's sibling is a
    descendant, a sibling's parent is one's own parent).
    """
    directions = [tie.direction for tie in path]
    up = down = 0
    for i, direction in enumerate(directions):
        if direction == Direction.UP:
            up += 1
        elif direction == Direction.DOWN:
            down += 1
        elif direction == Direction.LATERAL:
            previous = directions[i - 1] if i > 0 else None
            if previous in (Direction.LATERAL, Direction.DOWN):
                continue
            following = next(
                (d for d in directions[i + 1 :] if d != Direction.LATERAL), None
            )
            if following == Direction.UP:
                continue
            up += 1
            down += 1
    return up, down


def _lineal(count: int, one: str, two: str) -> str:
    if count == 1:
        return one
    return "great_" * (count - 2) + two


def kinship_label(up: int, down: int) -> tuple[str, RelationshipCategory, int | None, int | None]:
    """Name a relationship from its generation counts.

    Args:
        up: Generations from person_a up to the common ancestor
        down: Generations from the common ancestor down to person_b

    Returns:
        (label, category, cousin degree, removal); degree and removal are
        None for anything other than cousins
    """
    if up == 0 and down == 0:
        raise ValueError("A relationship needs at least one generation step")
    if down == 0:
        return _lineal(up, "parent", "grandparent"), RelationshipCategory.LINEAL, None, None
    if up == 0:
        return _lineal(down, "child", "grandchild"), RelationshipCategory.LINEAL, None, None
    if up == 1 and down == 1:
        return "sibling", RelationshipCategory.COLLATERAL, None, None
    if up == 1:
        return "great_" * (down - 2) + "niece_nephew", RelationshipCategory.COLLATERAL, None, None
    if down == 1:
        return "great_" * (up - 2) + "aunt_uncle", RelationshipCategory.COLLATERAL, None, None

    degree = min(up, down) - 1
    removal = abs(up - down)
    return f"{ordinal(degree)}_cousin", RelationshipCategory.COLLATERAL, degree, removal


def path_tie_kind(path: Sequence[Tie]) -> tuple[TieKind, TieKind | None]:
    """Decide the tie kind of a whole path.

    Guardianship dominates everything. Otherwise a single legal kind (step,
    adoptive, foster) forces that kind; several give ``mixed``.

    Returns:
        (tie kind, legal kind used as the label prefix or None)
    """
    kinds = {tie.kind for tie in path}
    if TieKind.GUARDIANSHIP in kinds:
        return TieKind.GUARDIANSHIP, None
    legal = [kind for kind in LEGAL_KINDS if kind in kinds]
    if not legal:
        return TieKind.BLOOD, None
    if len(legal) == 1:
        return legal[0], legal[0]
    return TieKind.MIXED, legal[0]


def _steps(path: Sequence[Tie]) -> list[PathStep]:
    return [
        PathStep(person_id=tie.person_id, tie_kind=tie.kind, direction=tie.direction)
        for tie in path
    ]


def _guardianship_label(path: Sequence[Tie]) -> str:
    if len(path) == 1:
        return "guardian" if path[0].direction == Direction.UP else "ward"
    return "guardianship_relative"


def classify_path(source: str, path: Sequence[Tie]) -> RelationshipResult:
    """Classify a kinship path found by the search.

    Args:
        source: Person the path starts from (person_a)
        path: Ties walked from source to person_b

    Returns:
        RelationshipResult describing what person_b is to person_a
    """
    if not path:
        raise ValueError("Cannot classify an empty path")

    up, down = generations(path)
    tie_kind, prefix = path_tie_kind(path)
    base, category, cousin_degree, removal = kinship_label(up, down)

    if tie_kind == TieKind.GUARDIANSHIP:
        label = _guardianship_label(path)
        category = RelationshipCategory.GUARDIANSHIP
    elif prefix is not None:
        label = f"{prefix.value}_{base}"
    else:
        label = base

    return RelationshipResult(
        person_a=source,
        person_b=path[-1].person_id,
        label=label,
        degree=cousin_degree if cousin_degree is not None else len(path),
        removal=removal,
        tie_kind=tie_kind,
        category=category,
        ascent=up,
        descent=down,
        distance=len(path),
        path=[source] + [tie.person_id for tie in path],
        steps=_steps(path),
    )


def classify_affinity(
    source: str, hop: Tie, path: Sequence[Tie], spouse_first: bool
) -> RelationshipResult:
    """Classify a relationship that crosses exactly one marriage or partnership.

    Args:
        source: Person the full path starts from (person_a)
        hop: The partner tie crossed
        path: The kinship path on the other side of the hop (may be empty
            for a direct spouse or partner)
        spouse_first: True for the spouse's relatives (hop then path),
            False for a relative's spouse (path then hop)

    Returns:
        RelationshipResult with the in-law (or step) relationship
    """
    full = (hop, *path) if spouse_first else (*path, hop)
    target = full[-1].person_id
    common = dict(
        person_a=source,
        person_b=target,
        distance=len(full),
        path=[source] + [tie.person_id for tie in full],
        steps=_steps(full),
    )

    if not path:
        label = "spouse" if hop.kind == TieKind.MARRIAGE else "partner"
        return RelationshipResult(
            label=label,
            degree=1,
            tie_kind=TieKind.IN_LAW,
            category=RelationshipCategory.AFFINITY,
            **common,
        )

    sub_source = hop.person_id if spouse_first else source
    underlying = classify_path(sub_source, path)

    if underlying.tie_kind == TieKind.GUARDIANSHIP:
        return RelationshipResult(
            label="guardianship_relative",
            degree=len(full),
            tie_kind=TieKind.GUARDIANSHIP,
            category=RelationshipCategory.GUARDIANSHIP,
            ascent=underlying.ascent,
            descent=underlying.descent,
            **common,
        )

    # Spouse's descendants and ancestors' spouses are step relations
    up, down = underlying.ascent, underlying.descent
    if spouse_first and up == 0:
        label = "step_" + _lineal(down, "child", "grandchild")
        tie_kind = TieKind.STEP
        category = RelationshipCategory.AFFINITY
    elif not spouse_first and down == 0:
        label = "step_" + _lineal(up, "parent", "grandparent")
        tie_kind = TieKind.STEP
        category = RelationshipCategory.AFFINITY
    else:
        label = f"{underlying.label}_in_law"
        tie_kind = TieKind.IN_LAW
        category = RelationshipCategory.AFFINITY

    is_cousin = underlying.removal is not None
    return RelationshipResult(
        label=label,
        degree=underlying.degree if is_cousin else len(full),
        removal=underlying.removal,
        tie_kind=tie_kind,
        category=category,
        ascent=up,
        descent=down,
        **common,
    )
