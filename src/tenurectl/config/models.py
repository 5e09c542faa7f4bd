"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tenurectl.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

Locale = Literal["en", "ar"]


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    locale: Locale = "en"
    date_format: str = "%d/%m/%Y"
