"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``solidctl.toml`` only contains
overrides. An empty file (or none at all) runs every demo as written.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class DemoConfig(BaseModel):
    """[demo] section."""

    model_config = {"frozen": True}

    user_data: str = "Kanishk"
    amount: float = 1000


class DiscountsConfig(BaseModel):
    """[discounts] section.

    ``tiers`` maps extra tier names to flat rates, e.g.
    ``[discounts.tiers]`` / ``platinum = 0.25``.
    """

    model_config = {"frozen": True}

    tiers: dict[str, float] = Field(default_factory=dict)

    @field_validator("tiers")
    @classmethod
    def _rates_in_range(cls, value: dict[str, float]) -> dict[str, float]:
        for name, rate in value.items():
            if not 0 <= rate <= 1:
                msg = f"Discount rate for {name!r} must be between 0 and 1, got {rate}"
                raise ValueError(msg)
        return value


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: Path = Path(".solidctl/plugins")
