"""Configuration management for the application."""

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sealed_pool_creator.models import ExclusionRules

# Load environment variables from .env file
load_dotenv()

DEFAULT_POOL_SIZE = 75
DEFAULT_SEED = 34384239482


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "Sealed Pool Creator"
    app_version: str = "0.1.0"
    debug: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    # Sampling
    pool_size: int = Field(default=DEFAULT_POOL_SIZE, ge=0)
    seed: int = Field(default=DEFAULT_SEED, ge=-(2**63), le=2**63 - 1)

    # Paths
    cards_path: Path = Field(default=Path("data/cards.json"))
    output_dir: Path = Field(default=Path("pools"))
    to_stdout: bool = Field(default=False)

    # Exclusion rules, given as JSON lists in the environment
    exclude_type_codes: frozenset[str] = Field(default=frozenset({"identity"}))
    exclude_set_codes: frozenset[str] = Field(default=frozenset({"special", "alt"}))
    exclude_cycle_numbers: frozenset[int] = Field(default=frozenset({6}))

    model_config = SettingsConfigDict(
        env_prefix="SEALED_POOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v

    def exclusion_rules(self) -> ExclusionRules:
        """Build the immutable rule set handed to the catalog loader."""
        return ExclusionRules(
            type_codes=self.exclude_type_codes,
            set_codes=self.exclude_set_codes,
            cycle_numbers=self.exclude_cycle_numbers,
        )

