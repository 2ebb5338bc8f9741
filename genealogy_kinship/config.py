"""Configuration management for Genealogy Kinship.

Loads settings from environment variables (prefix ``KINSHIP_``) and an
optional ``.env`` file.
"""

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KINSHIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Data source
    db_path: Path = Path("./genealogy.db")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    # Resolver behaviour
    strict_membership: bool = False
    include_in_law: bool = True


# Global settings instance
settings = Settings()
