"""Quart application for the kinship API."""

from pathlib import Path

from quart import Quart, jsonify
from quart_cors import cors

from genealogy_kinship import __version__
from genealogy_kinship.api.kinship import kinship_bp
from genealogy_kinship.config import settings

CORS_ORIGINS = [
    "http://localhost:5173",  # Vite dev server
    "http://localhost:3000",  # Alternative dev port
]


def create_app(
    db_path: Path | None = None,
    strict: bool | None = None,
    debug: bool = False,
) -> Quart:
    """Create and configure the Quart application.

    Args:
        db_path: SQLite database to read people and relationships from
            (default: settings.db_path)
        strict: Reject unknown person ids with 400 (default:
            settings.strict_membership)
        debug: Enable debug mode and CORS for a separately served frontend

    Returns:
        Configured Quart app
    """
    app = Quart(__name__)
    app.config.update(
        DEBUG=debug,
        DB_PATH=db_path or settings.db_path,
        STRICT_MEMBERSHIP=settings.strict_membership if strict is None else strict,
    )

    # Enable CORS for frontend (only needed in development)
    if debug:
        app = cors(
            app,
            allow_origin=CORS_ORIGINS,
            allow_methods=["GET", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
        )

    app.register_blueprint(kinship_bp)

    @app.route("/api/health", methods=["GET"])
    async def health_check():
        """Health check endpoint."""
        return jsonify(
            {
                "status": "healthy",
                "service": "genealogy-kinship",
                "version": __version__,
            }
        )

    return app


__all__ = ["create_app"]
