"""
Configuration settings for the dsa-survey service.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "dsa_survey" / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # API Server
    # ========================================
    host: str = Field(
        default="127.0.0.1",
        description="API server host",
    )
    port: int = Field(
        default=3000,
        description="API server port",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )

    # ========================================
    # Storage
    # ========================================
    db_path: Path = Field(
        default=Path("db.json"),
        description="JSON document holding users, sessions and the question mirror",
    )
    questions_path: Path = Field(
        default=PACKAGE_DATA_DIR / "questions.json",
        description="Question definition file loaded at startup",
    )
    openapi_path: Path = Field(
        default=PACKAGE_DATA_DIR / "openapi.yaml",
        description="Static OpenAPI document served at /openapi.yaml",
    )

    # ========================================
    # Survey
    # ========================================
    categories_requiring_general: list[str] = Field(
        default_factory=lambda: [
            "best-documentation",
            "best-accessibility",
            "best-governance",
            "best-collaboration",
            "best-adoption",
            "award-for-innovation",
        ],
        description="Categories whose generated documents need the general answers",
    )
    general_questions: list[str] = Field(
        default_factory=lambda: [
            "What’s the name of your organization?",
            "What’s the name of your design system?",
            "How big is your overall product organization (designers, developers, etc.)?",
            "How long has your design system existed?",
        ],
        description="Organization-wide questions shared by every category",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    # ========================================
    # Helper Methods
    # ========================================
    def get_survey_config(self) -> dict[str, object]:
        """Get survey configuration as a dictionary."""
        return {
            "questions_path": str(self.questions_path),
            "db_path": str(self.db_path),
            "categories_requiring_general": list(self.categories_requiring_general),
            "general_questions": len(self.general_questions),
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
