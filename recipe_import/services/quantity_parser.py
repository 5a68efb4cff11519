"""
Deterministic parsing of quantity tokens to float.
Handles integers, decimals, "3/4", "1 1/2" and single vulgar-fraction glyphs ("1½").
"""
import math
import re
from typing import Optional

# Glyph -> decimal value. Values are the three-place constants the UI has always stored.
VULGAR_FRACTIONS = {
    "\u00bd": 0.5,  # ½
    "\u2153": 0.333,  # ⅓
    "\u2154": 0.667,  # ⅔
    "\u00bc": 0.25,  # ¼
    "\u00be": 0.75,  # ¾
    "\u215b": 0.125,  # ⅛
    "\u215c": 0.375,  # ⅜
    "\u215d": 0.625,  # ⅝
    "\u215e": 0.875,  # ⅞
}

# Regex character class for a leading quantity expression: digits, spaces, slashes,
# periods and the Latin-1 / Number Forms fraction glyphs
QUANTITY_CHARS = "\\d\\s/\u00bc-\u00be\u2150-\u215e."

# A line that opens with a digit or fraction glyph
QUANTITY_START_RE = re.compile("^[\\d\u00bc-\u00be\u2150-\u215e]")

_MIXED_NUMBER_RE = re.compile(r"^(\d+)\s+(\d+)/(\d+)$")
_SIMPLE_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")
_LEADING_NUMBER_RE = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)")

# (numerator, denominator) pairs offered when formatting amounts for display
_DISPLAY_FRACTIONS = [(1, 8), (1, 4), (1, 3), (3, 8), (1, 2), (5, 8), (2, 3), (3, 4), (7, 8)]


def parse_int(digits: Optional[str], default):
    """
    int() for a regex-matched digit run, or default when the run is missing
    or too long for the interpreter to convert.
    """
    if not digits:
        return default
    try:
        return int(digits)
    except ValueError:
        return default


def _leading_number(text: str) -> Optional[float]:
    match = _LEADING_NUMBER_RE.match(text.strip())
    return float(match.group(0)) if match else None


def _ratio(numerator: str, denominator: str) -> Optional[float]:
    # None for a zero denominator or a result too large for a float
    try:
        return int(numerator) / int(denominator)
    except (ValueError, OverflowError, ZeroDivisionError):
        return None


def _decode(s: str) -> Optional[float]:
    for glyph, glyph_value in VULGAR_FRACTIONS.items():
        if glyph in s:
            whole = _leading_number(s.replace(glyph, "", 1))
            return (whole or 0.0) + glyph_value

    mixed = _MIXED_NUMBER_RE.match(s)
    if mixed:
        fraction = _ratio(mixed.group(2), mixed.group(3))
        if fraction is not None:
            return float(mixed.group(1)) + fraction

    simple = _SIMPLE_FRACTION_RE.match(s)
    if simple:
        fraction = _ratio(simple.group(1), simple.group(2))
        if fraction is not None:
            return fraction

    return _leading_number(s)


def parse_fraction(value: Optional[str]) -> float:
    """
    Decode a quantity token into a decimal amount.

    Priority: vulgar-fraction glyph (with optional whole-number prefix),
    mixed number, simple fraction, plain decimal. Anything unparseable or
    not finite is 1. No rounding happens here; callers round after deriving.
    """
    if value is None:
        return 1.0
    amount = _decode(value.strip())
    if amount is None or not math.isfinite(amount):
        return 1.0
    return amount


def round_amount(amount: float) -> float:
    """Round to 3 decimal places the way ingredient amounts are stored."""
    return round(amount, 3)


def format_amount(value: Optional[float]) -> str:
    """
    Render an amount for display: "2", "1 1/2", "3/4", or a short decimal.

    Fractions are used only when the fractional part is within 0.05 of a
    common kitchen fraction.
    """
    if value is None or not math.isfinite(value) or value == 0:
        return "0"
    whole = math.floor(value)
    decimal = value - whole
    if decimal < 0.01:
        return f"{whole}"

    numerator, denominator = min(
        _DISPLAY_FRACTIONS, key=lambda pair: abs(decimal - pair[0] / pair[1])
    )
    if abs(decimal - numerator / denominator) < 0.05:
        fraction = f"{numerator}/{denominator}"
        return f"{whole} {fraction}" if whole > 0 else fraction

    return f"{round(value, 2):g}"
