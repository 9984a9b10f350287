"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, gratuityctl.toml only
contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- gratuityctl.toml sections ---


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    currency: str = "AED"
    width: int = 100


class InputConfig(BaseModel):
    """[input] section — sanitization applied before calculation."""

    model_config = {"frozen": True}

    clamp_months: bool = True
    clamp_negative: bool = True

