"""Configuration models for catalog-model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PolicySettings(BaseModel):
    """Global settings."""

    log_level: str = Field(default="WARNING", description="Logging level for the CLI")
    api_versions: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Extra apiVersion values to accept, keyed by entity kind",
    )


class CatalogModelConfig(BaseModel):
    """Root configuration model."""

    version: int = Field(default=1)
    settings: PolicySettings = Field(default_factory=PolicySettings)
