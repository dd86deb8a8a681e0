"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here, persiancal.toml only holds
overrides.  An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

from persiancal.domain.formatting import LAYOUT_ISO, LAYOUT_LONG, LAYOUT_LONG_ENGLISH

GREGORIAN_ISO_LAYOUT = "%Y-%m-%d"


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    persian_digits: bool = False
    layout: str = LAYOUT_ISO
    long_layout: str = LAYOUT_LONG
    long_layout_english: str = LAYOUT_LONG_ENGLISH
    gregorian_layout: str = GREGORIAN_ISO_LAYOUT
    time_layout: str = "%H:%M:%S"


class DiffConfig(BaseModel):
    """[diff] section."""

    model_config = {"frozen": True}

    breakdown: bool = False
