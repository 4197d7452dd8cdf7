"""
Spin & Solve - Application Settings

Loads configuration from environment variables (prefix SPIN_SOLVE_) and an
optional .env file using Pydantic Settings.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spin_solve.engine.base import MAX_HINTS_PER_PHRASE
from spin_solve.engine.wheel import DEFAULT_SEGMENT_LABELS

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Round timing
    easy_round_seconds: int = Field(default=120, gt=0)
    hard_round_seconds: int = Field(default=180, gt=0)
    solve_penalty_seconds: int = Field(default=5, ge=0)

    # Economy
    vowel_cost: int = Field(default=3, ge=0)
    hint_cost: int = Field(default=5, ge=0)
    max_hints: int = Field(default=3, ge=0, le=MAX_HINTS_PER_PHRASE)
    # Credit gems and free hints only after the follow-up letter is found
    reward_on_correct_guess: bool = False

    # Wheel
    full_rotations: int = Field(default=6, ge=1)
    wheel_segments: list[str] = Field(default_factory=lambda: list(DEFAULT_SEGMENT_LABELS))

    # Phrase library (built-in pools when unset)
    phrase_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="SPIN_SOLVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {value!r}")
        return level

    @field_validator("wheel_segments")
    @classmethod
    def _non_empty_wheel(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("wheel_segments needs at least one label")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
