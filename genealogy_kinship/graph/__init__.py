"""Family graph construction."""

from genealogy_kinship.graph.builder import (
    FamilyGraph,
    FamilyGraphBuilder,
    PersonNode,
    Tie,
    build_family_graph,
    validate_edges,
)

__all__ = [
    "FamilyGraph",
    "FamilyGraphBuilder",
    "PersonNode",
    "Tie",
    "build_family_graph",
    "validate_edges",
]
