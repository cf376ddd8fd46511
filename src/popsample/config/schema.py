"""Pydantic schema for sampler configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

LEGACY_POPULATION_CAP = 4.5e15


class SamplerConfig(BaseModel):
    """Validated sampler configuration with defaults."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    population_cap: float = Field(default=LEGACY_POPULATION_CAP, gt=0.0)

    heavy_weight_threshold: float = Field(default=0.1, ge=0.0)
    alias_heavy_limit: int = Field(default=200, ge=0)
    alias_method: bool = False

    dense_permutation_limit: int = Field(default=10_000_000, gt=0)
    seed: int | None = None
