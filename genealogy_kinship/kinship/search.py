"""Breadth-first path search over the family graph.

Paths follow the shape of a kinship relation: steps up toward an ancestor,
then steps down. Once a path has gone down it never climbs again. Sibling
steps may appear anywhere in the path. Spouse and partner ties are never
traversed here; the affinity overlay in the resolver handles them.

Among paths of equal length an all-blood path wins, otherwise the path
discovered first (neighbour insertion order) is kept.
"""

import logging
from collections.abc import Iterator

from genealogy_kinship.graph import FamilyGraph, Tie
from genealogy_kinship.schemas import Direction, TieKind

logger = logging.getLogger(__name__)

Path = tuple[Tie, ...]

# (person id, descending) - once a path goes down it can only go down or sideways
_State = tuple[str, bool]


def is_blood_path(path: Path) -> bool:
    """Check if every tie in the path is a blood tie."""
    return all(tie.kind == TieKind.BLOOD for tie in path)


def _prefer(candidate: Path, current: Path | None) -> bool:
    return current is None or (is_blood_path(candidate) and not is_blood_path(current))


def _expand(graph: FamilyGraph, state: _State) -> Iterator[tuple[Tie, bool]]:
    person_id, descending = state
    for tie in graph.ties(person_id):
        if tie.direction == Direction.DOWN:
            yield tie, True
        elif tie.direction == Direction.LATERAL:
            # A sibling shares the generation, so the phase is unchanged
            yield tie, descending
        elif tie.direction == Direction.UP and not descending:
            yield tie, False


def _search(graph: FamilyGraph, source: str, target: str | None = None) -> dict[str, Path]:
    visited: dict[_State, Path] = {(source, False): ()}
    frontier: list[_State] = [(source, False)]
    found: dict[str, Path] = {}

    while frontier:
        layer: dict[_State, Path] = {}
        for state in frontier:
            base = visited[state]
            for tie, descending in _expand(graph, state):
                key = (tie.person_id, descending)
                if key in visited:
                    continue
                candidate = base + (tie,)
                if _prefer(candidate, layer.get(key)):
                    layer[key] = candidate

        reached: dict[str, Path] = {}
        for (person_id, _), path in layer.items():
            if person_id == source or person_id in found:
                continue
            if _prefer(path, reached.get(person_id)):
                reached[person_id] = path
        found.update(reached)

        if target is not None and target in found:
            break

        visited.update(layer)
        frontier = list(layer)

    return found


def find_path(graph: FamilyGraph, source: str, target: str) -> Path | None:
    """Find the preferred shortest kinship path between two people.

    Args:
        graph: Family graph to search
        source: Person the path starts from
        target: Person the path ends at

    Returns:
        Tuple of ties walked from source to target, or None if no path exists
    """
    path = _search(graph, source, target).get(target)
    if path is None:
        logger.debug("No kinship path from %s to %s", source, target)
    else:
        logger.debug("Found %d-step kinship path from %s to %s", len(path), source, target)
    return path


def shortest_paths(graph: FamilyGraph, source: str) -> dict[str, Path]:
    """Find the preferred shortest kinship path from source to everyone reachable.

    Returns:
        Mapping of person id to path, in discovery order
    """
    return _search(graph, source)
