"""
Ingredient line parsing: "1 1/2 cups flour," -> Ingredient(1.5, "cups", "flour").
Shared by the text parser and the structured-data adapter.
"""
import re
from typing import Optional

from recipe_import.models import Ingredient
from recipe_import.services.junk_filter import is_junk_line
from recipe_import.services.quantity_parser import QUANTITY_CHARS, parse_fraction, round_amount
from recipe_import.services.units import DEFAULT_UNIT, UNIT_PATTERN, normalize_unit

# Bullets, dashes and arrows that list markup leaves at the start of a line
BULLET_RE = re.compile(
    "^[\\s\u2022\u2023\u25e6\u2043\u2219\\-*\u2013\u2014\u25cf\u25cb\u00b7\u203a\u2192]+\\s*"
)

# Optional quantity, a known unit word (optional trailing period), then the name
UNIT_LINE_RE = re.compile(
    "^([" + QUANTITY_CHARS + "]+)?\\s*(" + UNIT_PATTERN + ")\\.?\\s+(.+)",
    re.IGNORECASE,
)
# Quantity but no recognized unit: "3 eggs"
QUANTITY_LINE_RE = re.compile("^([" + QUANTITY_CHARS + "]+)\\s+(.+)")
TRAILING_COMMA_RE = re.compile(r",\s*$")


def strip_bullet(line: str) -> str:
    return BULLET_RE.sub("", line).strip()


def _clean_name(name: str) -> str:
    return TRAILING_COMMA_RE.sub("", name).strip()


def parse_ingredient_line(line: str, skip_junk: bool = True) -> Optional[Ingredient]:
    """
    Parse one ingredient line into amount, unit and name.

    Falls back from unit-bearing match, to quantity-only match, to the whole
    line as the name with amount 1. Returns None only when nothing is left
    after bullet stripping, or (with skip_junk) the line turns out to be
    metadata.
    """
    text = strip_bullet(line)
    if not text or (skip_junk and is_junk_line(text)):
        return None

    match = UNIT_LINE_RE.match(text)
    if match:
        quantity, raw_unit, name = match.groups()
        amount = parse_fraction(quantity) if quantity else 1.0
        return Ingredient(
            amount=round_amount(amount),
            unit=normalize_unit(raw_unit),
            name=_clean_name(name),
        )

    match = QUANTITY_LINE_RE.match(text)
    if match:
        quantity, name = match.groups()
        return Ingredient(
            amount=round_amount(parse_fraction(quantity)),
            unit=DEFAULT_UNIT,
            name=_clean_name(name),
        )

    return Ingredient(amount=1, unit=DEFAULT_UNIT, name=text)
