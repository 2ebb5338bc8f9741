"""Render resolved relationships as plain-language sentences.

Rendering is stateless: it needs the two Person records and the result, and
uses person_b's gender (when known) to pick gendered terms.
"""

import re
from collections.abc import Mapping

from genealogy_kinship.schemas import (
    Direction,
    PathStep,
    Person,
    RelationshipCategory,
    RelationshipResult,
    TieKind,
)

# core label -> (male term, female term, neutral term)
TERMS: dict[str, tuple[str, str, str]] = {
    "parent": ("father", "mother", "parent"),
    "grandparent": ("grandfather", "grandmother", "grandparent"),
    "child": ("son", "daughter", "child"),
    "grandchild": ("grandson", "granddaughter", "grandchild"),
    "sibling": ("brother", "sister", "sibling"),
    "aunt_uncle": ("uncle", "aunt", "aunt/uncle"),
    "niece_nephew": ("nephew", "niece", "niece/nephew"),
    "spouse": ("husband", "wife", "spouse"),
    "partner": ("partner", "partner", "partner"),
    "guardian": ("guardian", "guardian", "guardian"),
    "ward": ("ward", "ward", "ward"),
}

REMOVALS = {1: "once removed", 2: "twice removed"}

_ONES = [
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
]
_TENS = ["", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]

_LABEL_PATTERN = re.compile(
    r"^(?:(?P<prefix>step|adoptive|foster)_)?"
    r"(?P<greats>(?:great_)*)"
    r"(?P<core>.+?)"
    r"(?P<in_law>_in_law)?$"
)


def _gendered(core: str, sex: str | None) -> str:
    male, female, neutral = TERMS.get(core, (core, core, core))
    if sex == "male":
        return male
    if sex == "female":
        return female
    return neutral


def number_word(n: int) -> str:
    """Spell out a non-negative number: 4 -> 'four', 42 -> 'forty-two'."""
    if n < 20:
        return _ONES[n]
    if n < 100:
        tens, ones = divmod(n, 10)
        return _TENS[tens] + (f"-{_ONES[ones]}" if ones else "")
    if n < 1000:
        hundreds, rest = divmod(n, 100)
        return f"{_ONES[hundreds]} hundred" + (f" {number_word(rest)}" if rest else "")
    thousands, rest = divmod(n, 1000)
    return f"{number_word(thousands)} thousand" + (f" {number_word(rest)}" if rest else "")


def removal_phrase(removal: int | None) -> str:
    """Describe a cousin removal: 1 -> 'once removed', 5 -> 'five times removed'."""
    if not removal:
        return ""
    return REMOVALS.get(removal, f"{number_word(removal)} times removed")


def relationship_term(label: str, removal: int | None = None, sex: str | None = None) -> str:
    """Turn a relationship label into a readable term.

    Examples:
        relationship_term("step_grandparent", sex="female") -> "step-grandmother"
        relationship_term("first_cousin", removal=1) -> "first cousin once removed"
        relationship_term("sibling_in_law", sex="male") -> "brother-in-law"
    """
    match = _LABEL_PATTERN.match(label)
    if match is None:
        return label.replace("_", " ")

    core = match.group("core")
    if core.endswith("_cousin"):
        term = core.replace("_", " ")
    else:
        term = _gendered(core, sex).replace("_", " ")

    greats = match.group("greats").count("great_")
    term = "great-" * greats + term

    if match.group("in_law"):
        term = f"{term}-in-law"

    phrase = removal_phrase(removal)
    if phrase:
        term = f"{term} {phrase}"

    prefix = match.group("prefix")
    if prefix == "step":
        term = f"step-{term}"
    elif prefix:
        term = f"{prefix} {term}"
    return term


def _step_term(step: PathStep, sex: str | None = None) -> str:
    if step.direction == Direction.PARTNER:
        core = "spouse" if step.tie_kind == TieKind.MARRIAGE else "partner"
    elif step.tie_kind == TieKind.GUARDIANSHIP:
        core = "guardian" if step.direction == Direction.UP else "ward"
    elif step.direction == Direction.UP:
        core = "parent"
    elif step.direction == Direction.DOWN:
        core = "child"
    else:
        core = "sibling"

    term = _gendered(core, sex)
    if step.tie_kind == TieKind.STEP:
        term = f"step-{term}"
    elif step.tie_kind in (TieKind.ADOPTIVE, TieKind.FOSTER):
        term = f"{step.tie_kind.value} {term}"
    return term


def _possessive(name: str) -> str:
    return f"{name}'" if name.endswith("s") else f"{name}'s"


def describe_term(result: RelationshipResult, sex: str | None = None) -> str:
    """The term for what person_b is to person_a, without names.

    Guardianship paths longer than one step are never phrased in blood terms;
    they come back as a possessive chain such as "guardian's son".
    """
    if result.category == RelationshipCategory.GUARDIANSHIP and len(result.steps) > 1:
        terms = [_step_term(step) for step in result.steps[:-1]]
        terms.append(_step_term(result.steps[-1], sex))
        return "'s ".join(terms)
    return relationship_term(result.label, result.removal, sex)


def describe_relationship(
    person_a: Person, person_b: Person, result: RelationshipResult
) -> str:
    """Describe what person_b is to person_a in one sentence.

    Args:
        person_a: Person the question was asked from
        person_b: Person whose relationship is described
        result: Result of resolving (person_a, person_b)

    Returns:
        Sentence such as "Bob is Alice's first cousin"
    """
    if not result.is_related:
        return f"{person_a.name} and {person_b.name} are not related"

    term = describe_term(result, person_b.sex)
    return f"{person_b.name} is {_possessive(person_a.name)} {term}"


def explain_path(result: RelationshipResult, people: Mapping[str, Person] | None = None) -> str:
    """Render the chosen path step by step, for explanation and debugging.

    Example:
        "Alice -> parent John -> parent Mary -> child Sue -> child Bob"
    """
    if not result.path:
        return ""

    people = people or {}

    def name(person_id: str) -> str:
        person = people.get(person_id)
        return person.name if person else person_id

    parts = [name(result.path[0])]
    for step in result.steps:
        parts.append(f"{_step_term(step)} {name(step.person_id)}")
    return " -> ".join(parts)
