"""Configuration for fuzzy_lookup using Pydantic models and settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Candidates re-scored by edit distance per query
LEVENSHTEIN_MAX_INDEX = 50


class FuzzySetConfig(BaseModel):
    """Immutable index configuration, validated once at construction."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    use_levenshtein: bool = Field(default=True, description="Re-score top candidates by normalized edit distance")
    gram_size_lower: int = Field(default=2, ge=1, description="Smallest n-gram length indexed")
    gram_size_upper: int = Field(default=3, ge=1, description="Largest n-gram length indexed")
    levenshtein_max_candidates: int = Field(
        default=LEVENSHTEIN_MAX_INDEX,
        ge=1,
        description="How many top cosine candidates are re-scored by edit distance",
    )

    @model_validator(mode="after")
    def _check_gram_bounds(self) -> FuzzySetConfig:
        if self.gram_size_lower > self.gram_size_upper:
            raise ValueError(
                f"gram_size_lower ({self.gram_size_lower}) must not exceed gram_size_upper ({self.gram_size_upper})"
            )
        return self

    @property
    def gram_sizes(self) -> range:
        """Inclusive range of indexed gram sizes, ascending."""
        return range(self.gram_size_lower, self.gram_size_upper + 1)


class Settings(BaseSettings):
    """Environment-driven defaults (``FUZZY_LOOKUP_*`` variables)."""

    model_config = SettingsConfigDict(
        env_prefix="FUZZY_LOOKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    use_levenshtein: bool = Field(default=True, description="Enable edit-distance refinement")
    gram_size_lower: int = Field(default=2, ge=1, description="Smallest n-gram length indexed")
    gram_size_upper: int = Field(default=3, ge=1, description="Largest n-gram length indexed")
    levenshtein_max_candidates: int = Field(default=LEVENSHTEIN_MAX_INDEX, ge=1)

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    def to_index_config(self) -> FuzzySetConfig:
        return FuzzySetConfig(
            use_levenshtein=self.use_levenshtein,
            gram_size_lower=self.gram_size_lower,
            gram_size_upper=self.gram_size_upper,
            levenshtein_max_candidates=self.levenshtein_max_candidates,
        )
