"""Genealogy Kinship CLI - Main entry point.

This module provides the command-line interface for asking how people in a
family tree are related.
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from genealogy_kinship.config import settings
from genealogy_kinship.errors import KinshipError
from genealogy_kinship.kinship import (
    RelationshipResolver,
    describe_relationship,
    describe_term,
    explain_path,
)
from genealogy_kinship.storage import FamilyDataset, GenealogyDatabase, load_edge_file

app = typer.Typer(
    name="kinship",
    help="Genealogy Kinship - Work out how two people in a family tree are related",
    add_completion=False,
)
console = Console()

DB_OPTION = typer.Option(settings.db_path, "--db", help="Path to SQLite database")
EDGES_OPTION = typer.Option(
    None, "--edges", "-e", help="JSON edge file to use instead of the database", exists=True
)


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def _load_dataset(db_path: Path, edges_path: Path | None) -> FamilyDataset:
    if edges_path is not None:
        return load_edge_file(edges_path)
    if not db_path.exists():
        console.print(f"[red]Database not found: {db_path}[/red]")
        raise typer.Exit(1)
    return GenealogyDatabase(db_path=db_path).load_dataset()


def _find_person_id(dataset: FamilyDataset, graph_ids: set[str], key: str) -> str:
    """Accept either a person id or an exact (case-insensitive) name."""
    if key in graph_ids or any(person.id == key for person in dataset.people):
        return key

    matches = [person for person in dataset.people if person.name.lower() == key.lower()]
    if len(matches) == 1:
        return matches[0].id
    if len(matches) > 1:
        ids = ", ".join(person.id for person in matches)
        console.print(f"[yellow]'{key}' matches several people ({ids}); use an id.[/yellow]")
        raise typer.Exit(1)
    return key


@app.command()
def relate(
    person_a: str = typer.Argument(..., help="Id or name of the person asking"),
    person_b: str = typer.Argument(..., help="Id or name of the other person"),
    db_path: Path = DB_OPTION,
    edges_path: Path | None = EDGES_OPTION,
    strict: bool = typer.Option(
        settings.strict_membership, "--strict", help="Reject people missing from the tree"
    ),
    show_path: bool = typer.Option(False, "--path", "-p", help="Show the path that was used"),
) -> None:
    """Show how PERSON_B is related to PERSON_A."""
    try:
        dataset = _load_dataset(db_path, edges_path)
        graph = dataset.build_graph()
        a_id = _find_person_id(dataset, set(graph), person_a)
        b_id = _find_person_id(dataset, set(graph), person_b)
        result = RelationshipResolver(graph, strict=strict).resolve(a_id, b_id)
    except KinshipError as e:
        console.print(f"[red]{e!s}[/red]")
        raise typer.Exit(1) from e

    sentence = describe_relationship(dataset.get_person(a_id), dataset.get_person(b_id), result)
    console.print(f"\n[bold cyan]{sentence}[/bold cyan]\n")

    if not result.is_related:
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Field", style="dim")
    table.add_column("Value", justify="right")

    table.add_row("Label", result.label)
    table.add_row("Tie Kind", result.tie_kind.value if result.tie_kind else "-")
    table.add_row("Category", result.category.value)
    table.add_row("Degree", str(result.degree))
    if result.removal is not None:
        table.add_row("Removal", str(result.removal))
    table.add_row("Path Length", str(result.distance))
    console.print(table)

    if show_path:
        console.print(f"\n[dim]Path:[/dim] {explain_path(result, dataset.people_by_id())}\n")


@app.command()
def relatives(
    person: str = typer.Argument(..., help="Id or name of the person"),
    db_path: Path = DB_OPTION,
    edges_path: Path | None = EDGES_OPTION,
) -> None:
    """List everyone related to PERSON, closest first."""
    try:
        dataset = _load_dataset(db_path, edges_path)
        graph = dataset.build_graph()
        person_id = _find_person_id(dataset, set(graph), person)
        results = RelationshipResolver(graph).resolve_all(person_id)
    except KinshipError as e:
        console.print(f"[red]{e!s}[/red]")
        raise typer.Exit(1) from e

    owner = dataset.get_person(person_id)
    if not results:
        console.print(f"[yellow]No relatives found for {owner.name}.[/yellow]\n")
        return

    table = Table(show_header=True, header_style="bold cyan", title=f"Relatives of {owner.name}")
    table.add_column("Person")
    table.add_column("Relationship")
    table.add_column("Tie Kind", style="dim")
    table.add_column("Path Length", justify="right")

    for result in results:
        other = dataset.get_person(result.person_b)
        table.add_row(
            other.name,
            describe_term(result, other.sex),
            result.tie_kind.value if result.tie_kind else "-",
            str(result.distance),
        )

    console.print(table)
    console.print()


@app.command()
def stats(
    db_path: Path = DB_OPTION,
    edges_path: Path | None = EDGES_OPTION,
) -> None:
    """Display statistics about the family graph."""
    console.print("\n[bold cyan]Genealogy Kinship - Family Graph Statistics[/bold cyan]\n")

    try:
        dataset = _load_dataset(db_path, edges_path)
    except KinshipError as e:
        console.print(f"[red]{e!s}[/red]")
        raise typer.Exit(1) from e
    graph = dataset.build_graph()

    table = Table(show_header=True, header_style="bold cyan", title="Family Graph")
    table.add_column("Metric", style="dim")
    table.add_column("Count", justify="right")

    table.add_row("People", str(len(graph)))
    table.add_row("Relationship Records", str(len(dataset.relationships)))
    table.add_row("Ties", str(graph.tie_count))
    isolated = sum(1 for node in graph.nodes.values() if not node.ties)
    table.add_row("People Without Ties", str(isolated))

    console.print(table)
    console.print()

    if edges_path is None:
        db_stats = GenealogyDatabase(db_path=db_path).get_stats()

        table = Table(show_header=True, header_style="bold cyan", title="SQLite Database")
        table.add_column("Metric", style="dim")
        table.add_column("Count", justify="right")

        for key, value in db_stats.items():
            table.add_row(key.replace("_", " ").title(), str(value))

        console.print(table)
        console.print()


@app.command()
def version() -> None:
    """Display version information."""
    from genealogy_kinship import __version__

    console.print(f"\n[bold cyan]Genealogy Kinship[/bold cyan] version {__version__}\n")


if __name__ == "__main__":
    app()
