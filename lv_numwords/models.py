"""
Pydantic models for conversion results.

The converter itself returns plain strings; these models are what the
HTTP layer and the CLI hand back when they need the full picture.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ConversionKind(str, Enum):
    """Which rendering path produced the words."""

    INTEGER = "INTEGER"  # Plain cardinal number
    CURRENCY = "CURRENCY"  # "... eiro [un ... centi]"


class Conversion(BaseModel):
    """A single number rendered as Latvian words."""

    number: str  # Canonical positional decimal text of the input
    kind: ConversionKind
    words: str
