"""Kinship API endpoints ("how are we related" finder)."""

import logging
from pathlib import Path

from quart import Blueprint, current_app, jsonify, request

from genealogy_kinship.errors import KinshipError
from genealogy_kinship.kinship import (
    RelationshipResolver,
    describe_relationship,
    describe_term,
    explain_path,
)
from genealogy_kinship.storage import FamilyDataset, GenealogyDatabase

logger = logging.getLogger(__name__)

kinship_bp = Blueprint("kinship", __name__)


def _load_dataset() -> FamilyDataset:
    db_path = Path(current_app.config.get("DB_PATH", "./genealogy.db"))
    if not db_path.exists():
        # Empty tree until the record-keeping layer writes something
        return FamilyDataset()
    return GenealogyDatabase(db_path=db_path).load_dataset()


@kinship_bp.route("/api/kinship", methods=["GET"])
async def relate():
    """Resolve how person_b is related to person_a.

    Query parameters:
        - person_a: Id of the person asking
        - person_b: Id of the other person

    Returns:
        JSON with the relationship result, a sentence and the path
    """
    person_a = request.args.get("person_a")
    person_b = request.args.get("person_b")
    if not person_a or not person_b:
        return jsonify({"error": "Both person_a and person_b are required"}), 400

    try:
        dataset = _load_dataset()
        resolver = RelationshipResolver(
            dataset.build_graph(), strict=current_app.config.get("STRICT_MEMBERSHIP")
        )
        result = resolver.resolve(person_a, person_b)
    except KinshipError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.exception("Failed to resolve %s -> %s", person_a, person_b)
        return jsonify({"error": f"Failed to resolve relationship: {e!s}"}), 500

    return jsonify(
        {
            "success": True,
            "result": result.model_dump(mode="json"),
            "description": describe_relationship(
                dataset.get_person(person_a), dataset.get_person(person_b), result
            ),
            "path": explain_path(result, dataset.people_by_id()),
        }
    ), 200


@kinship_bp.route("/api/kinship/<person_id>/relatives", methods=["GET"])
async def relatives(person_id: str):
    """List everyone related to a person, closest first.

    Returns:
        JSON with one entry per relative
    """
    try:
        dataset = _load_dataset()
        resolver = RelationshipResolver(
            dataset.build_graph(), strict=current_app.config.get("STRICT_MEMBERSHIP")
        )
        results = resolver.resolve_all(person_id)
    except KinshipError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.exception("Failed to list relatives of %s", person_id)
        return jsonify({"error": f"Failed to list relatives: {e!s}"}), 500

    relatives_data = []
    for result in results:
        other = dataset.get_person(result.person_b)
        relatives_data.append(
            {
                "id": other.id,
                "name": other.name,
                "relationship": describe_term(result, other.sex),
                "label": result.label,
                "tie_kind": result.tie_kind.value if result.tie_kind else None,
                "distance": result.distance,
            }
        )

    return jsonify(
        {
            "success": True,
            "count": len(relatives_data),
            "relatives": relatives_data,
        }
    ), 200
