"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, meetcount.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    meetings_file: str = "input.csv"
    holidays_file: str = "holidays.csv"
    comment_prefix: str = Field(default="#", min_length=1)


class CountingConfig(BaseModel):
    """[counting] section.

    ``remainder_rule`` selects how leftover days after the full weeks are
    matched against the target weekday: ``legacy`` keeps the historical
    non-wrapping comparison, ``wrapped`` counts exactly.
    """

    model_config = {"frozen": True}

    remainder_rule: Literal["legacy", "wrapped"] = "legacy"
    exclude_holidays: bool = True

