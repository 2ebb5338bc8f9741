"""Tests for the kinship command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from genealogy_kinship import __version__
from genealogy_kinship.cli.main import app

runner = CliRunner()


@pytest.fixture
def edge_file(tmp_path: Path) -> Path:
    path = tmp_path / "family.json"
    path.write_text(
        json.dumps(
            {
                "people": [
                    {"id": "mary", "name": "Mary", "gender": "F"},
                    {"id": "john", "name": "John", "gender": "M"},
                    {"id": "sue", "name": "Sue", "gender": "F"},
                    {"id": "alice", "name": "Alice", "gender": "F"},
                    {"id": "bob", "name": "Bob", "gender": "M"},
                ],
                "relationships": [
                    {"person_a": "mary", "person_b": "john", "relationship_type": "parent_child"},
                    {"person_a": "mary", "person_b": "sue", "relationship_type": "parent_child"},
                    {"person_a": "john", "person_b": "alice", "relationship_type": "parent_child"},
                    {"person_a": "sue", "person_b": "bob", "relationship_type": "parent_child"},
                ],
            }
        )
    )
    return path


def test_relate_from_edge_file(edge_file: Path) -> None:
    result = runner.invoke(app, ["relate", "alice", "bob", "--edges", str(edge_file)])

    assert result.exit_code == 0
    assert "Bob is Alice's first cousin" in result.output
    assert "first_cousin" in result.output


def test_relate_by_name_with_path(edge_file: Path) -> None:
    result = runner.invoke(app, ["relate", "Alice", "mary", "--edges", str(edge_file), "--path"])

    assert result.exit_code == 0
    assert "Mary is Alice's grandmother" in result.output
    assert "Alice -> parent John -> parent Mary" in result.output


def test_relate_unrelated(edge_file: Path) -> None:
    result = runner.invoke(app, ["relate", "alice", "nobody", "--edges", str(edge_file)])

    assert result.exit_code == 0
    assert "not related" in result.output


def test_relate_self_fails(edge_file: Path) -> None:
    result = runner.invoke(app, ["relate", "alice", "alice", "--edges", str(edge_file)])

    assert result.exit_code == 1
    assert "themselves" in result.output


def test_relate_strict_unknown_fails(edge_file: Path) -> None:
    result = runner.invoke(
        app, ["relate", "alice", "nobody", "--edges", str(edge_file), "--strict"]
    )

    assert result.exit_code == 1
    assert "Unknown person" in result.output


def test_malformed_edge_file_fails_cleanly(tmp_path: Path) -> None:
    path = tmp_path / "family.json"
    path.write_text(json.dumps({"relationships": None}))

    result = runner.invoke(app, ["relate", "a", "b", "--edges", str(path)])

    assert result.exit_code == 1
    assert "must be a list" in result.output
    assert not isinstance(result.exception, TypeError)


def test_relate_from_database(family_db: Path) -> None:
    result = runner.invoke(app, ["relate", "4", "5", "--db", str(family_db)])

    assert result.exit_code == 0
    assert "Bob is Alice's first cousin" in result.output


def test_missing_database(tmp_path: Path) -> None:
    result = runner.invoke(app, ["relate", "1", "2", "--db", str(tmp_path / "missing.db")])

    assert result.exit_code == 1
    assert "Database not found" in result.output


def test_relatives(edge_file: Path) -> None:
    result = runner.invoke(app, ["relatives", "alice", "--edges", str(edge_file)])

    assert result.exit_code == 0
    assert "father" in result.output
    assert "grandmother" in result.output
    assert "aunt" in result.output
    assert "first cousin" in result.output


def test_stats_from_database(family_db: Path) -> None:
    result = runner.invoke(app, ["stats", "--db", str(family_db)])

    assert result.exit_code == 0
    assert "People" in result.output
    assert "Total Relationships" in result.output


def test_version() -> None:
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
