"""
Convert numbers to their written-out Latvian words.

Supported patterns:
    0            → "nulle"
    21           → "divdesmit viens"
    1_500_000    → "viens miljons pieci simti tūkstoši"
    -42          → "mīnus četrdesmit divi"
    123.45       → "viens simts divdesmit trīs eiro un četrdesmit pieci centi"

Values with a non-zero fractional part are treated as euro amounts. The
cents are read from the decimal text of the value, never rounded: 5.1 is
one cent, 0.005 is five.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal, InvalidOperation
from types import MappingProxyType

from .exceptions import InvalidInput, OutOfRange
from .models import Conversion, ConversionKind

logger = logging.getLogger(__name__)

# 64-bit signed ceiling; -MAX_INT is the floor.
MAX_INT = 2**63 - 1

# ─── Word Lookup Tables ──────────────────────────────────────────────

_SMALL_NUMBERS = MappingProxyType({
    0: "nulle",
    1: "viens",
    2: "divi",
    3: "trīs",
    4: "četri",
    5: "pieci",
    6: "seši",
    7: "septiņi",
    8: "astoņi",
    9: "deviņi",
    10: "desmit",
    11: "vienpadsmit",
    12: "divpadsmit",
    13: "trīspadsmit",
    14: "četrpadsmit",
    15: "piecpadsmit",
    16: "sešpadsmit",
    17: "septiņpadsmit",
    18: "astoņpadsmit",
    19: "deviņpadsmit",
    20: "divdesmit",
    30: "trīsdesmit",
    40: "četrdesmit",
    50: "piecdesmit",
    60: "sešdesmit",
    70: "septiņdesmit",
    80: "astoņdesmit",
    90: "deviņdesmit",
})

_SCALES = MappingProxyType({
    100: "simts",
    1_000: "tūkstotis",
    1_000_000: "miljons",
    1_000_000_000: "miljards",
    1_000_000_000_000: "triljons",
})

_PLURALS = MappingProxyType({
    "simts": "simti",
    "tūkstotis": "tūkstoši",
    "miljons": "miljoni",
    "miljards": "miljardi",
    "triljons": "triljoni",
})

# Largest first: the first threshold <= n wins
_SCALE_THRESHOLDS: tuple[int, ...] = tuple(sorted(_SCALES, reverse=True))

CURRENCY_MAIN = "eiro"
CURRENCY_SUB = "centi"
CURRENCY_CONNECTOR = "un"
NEGATIVE = "mīnus"


# ─── Input Boundary ──────────────────────────────────────────────────


def _coerce(number: object) -> int | Decimal:
    """Narrow a loosely typed input to ``int`` or ``Decimal``.

    Floats go through their shortest repr so that 123.45 becomes
    Decimal("123.45") rather than the binary approximation.

    Raises:
        InvalidInput: None, bool, NaN/infinity, unparseable strings, other types.
        OutOfRange: |number| > MAX_INT.
    """
    details = {"value": repr(number), "type": type(number).__name__}

    if isinstance(number, bool) or number is None:
        raise InvalidInput("Input must be numeric", details)

    if isinstance(number, int):
        value: int | Decimal = number
    elif isinstance(number, float):
        if not math.isfinite(number):
            raise InvalidInput("Input must be a finite number", details)
        value = Decimal(repr(number))
    elif isinstance(number, Decimal):
        if not number.is_finite():
            raise InvalidInput("Input must be a finite number", details)
        value = number
    elif isinstance(number, str):
        try:
            value = Decimal(number.strip())
        except InvalidOperation:
            raise InvalidInput(f"Input is not a number: {number!r}", details) from None
        if not value.is_finite():
            raise InvalidInput("Input must be a finite number", details)
    else:
        raise InvalidInput("Input must be numeric", details)

    if abs(value) > MAX_INT:
        raise OutOfRange(
            "Number exceeds 64-bit integer limits",
            {**details, "max_int": MAX_INT},
        )
    return value


def _has_fraction(value: int | Decimal) -> bool:
    return isinstance(value, Decimal) and value != value.to_integral_value()


def _as_text(value: int | Decimal) -> str:
    """Positional decimal text, never scientific notation."""
    return format(value, "f") if isinstance(value, Decimal) else str(value)


def _render(value: int | Decimal, currency: bool) -> str:
    """Words for an already validated value."""
    if currency:
        logger.debug("Converting %s as currency", _as_text(value))
        return _convert_currency(Decimal(value))

    logger.debug("Converting %s as integer", _as_text(value))
    return _convert_integer(int(value))


# ─── Public API ──────────────────────────────────────────────────────


def is_currency_value(number: object) -> bool:
    """True when *number* has a non-zero fractional part."""
    return _has_fraction(_coerce(number))


def convert(number: object, *, as_currency: bool = False) -> str:
    """Convert a number to Latvian words.

    Args:
        number: int, float, Decimal, or a numeric string.
        as_currency: render as a euro amount even when the value is integral.

    Returns:
        e.g. "viens simts divdesmit trīs eiro un četrdesmit pieci centi"

    Raises:
        InvalidInput: If the value is not numeric.
        OutOfRange: If |number| exceeds MAX_INT.
    """
    value = _coerce(number)
    return _render(value, as_currency or _has_fraction(value))


def describe(number: object, *, as_currency: bool = False) -> Conversion:
    """Convert *number* and return the words with how they were produced."""
    value = _coerce(number)
    currency = as_currency or _has_fraction(value)
    return Conversion(
        number=_as_text(value),
        kind=ConversionKind.CURRENCY if currency else ConversionKind.INTEGER,
        words=_render(value, currency),
    )


# ─── Currency ────────────────────────────────────────────────────────


def _convert_currency(value: Decimal) -> str:
    """Render "<whole> eiro [un <cents> centi]".

    The cents are whatever digits follow the decimal point in the text of
    the value, parsed as an integer: no padding, no rounding.
    """
    whole_text, _, cents_text = format(abs(value), "f").partition(".")
    whole = int(whole_text)
    cents = int(cents_text) if cents_text else 0

    result = f"{_convert_integer(whole)} {CURRENCY_MAIN}"
    if cents > 0:
        result += f" {CURRENCY_CONNECTOR} {_convert_integer(cents)} {CURRENCY_SUB}"

    return f"{NEGATIVE} {result}" if value < 0 else result


# ─── Integer Decomposition ───────────────────────────────────────────


def _convert_integer(number: int) -> str:
    """Recursive plain-integer conversion.

    Algorithm:
        - direct hit in the small-number or scale table → that word
        - else the largest scale threshold t <= n splits n into
          (n // t) scale-words followed by the words for n % t
        - else n < 100 is a tens + units compound
    """
    if number < 0:
        return f"{NEGATIVE} {_convert_integer(-number)}"

    if number in _SMALL_NUMBERS:
        return _SMALL_NUMBERS[number]
    if number in _SCALES:
        return _SCALES[number]

    for threshold in _SCALE_THRESHOLDS:
        if number >= threshold:
            return _convert_scaled(number, threshold)

    return _convert_compound(number)


def _convert_scaled(number: int, threshold: int) -> str:
    quotient, remainder = divmod(number, threshold)

    converted = f"{_convert_integer(quotient)} {_scale_word(_SCALES[threshold], quotient)}"
    if remainder > 0:
        converted += f" {_convert_integer(remainder)}"
    return converted


def _scale_word(name: str, quantifier: int) -> str:
    """Singular for exactly one, plural for everything else."""
    if quantifier == 1:
        return name
    return _PLURALS.get(name, name)


def _convert_compound(number: int) -> str:
    """Numbers between 21-99, and 101-999.

    The 100-999 branch is shadowed by the "simts" scale threshold in
    _convert_integer and only runs when called directly. Note it renders
    a single hundred as bare "simts", where the scale path says "viens simts".
    """
    if number < 100:
        tens, units = divmod(number, 10)
        return f"{_SMALL_NUMBERS[tens * 10]} {_SMALL_NUMBERS[units]}"

    hundreds, remainder = divmod(number, 100)
    if hundreds == 1:
        result = _SCALES[100]
    else:
        result = f"{_SMALL_NUMBERS[hundreds]} {_PLURALS[_SCALES[100]]}"

    if remainder > 0:
        result += f" {_convert_integer(remainder)}"
    return result
