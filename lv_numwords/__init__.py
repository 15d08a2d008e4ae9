"""
lv_numwords: Latvian written-word rendering of numbers and euro amounts.

Architecture: Validate → Dispatch (integer / currency) → Recursive scale decomposition
Philosophy:  Fixed lookup tables, one binary agreement rule, no rounding.
"""

from .converter import MAX_INT, convert, describe, is_currency_value
from .exceptions import InvalidInput, NumberConversionError, OutOfRange

__version__ = "1.0.0"

__all__ = [
    "MAX_INT",
    "InvalidInput",
    "NumberConversionError",
    "OutOfRange",
    "convert",
    "describe",
    "is_currency_value",
]
