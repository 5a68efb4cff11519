"""
Unit normalization: many spellings, one canonical short token.
"""
import re

CANONICAL_UNITS = (
    "cups", "tbsp", "tsp", "oz", "lb", "g", "kg", "ml", "L", "pcs", "pinch",
    "whole", "slices", "cloves", "cans", "bags", "sticks", "bunch",
    "large", "medium", "small", "dash",
)

DEFAULT_UNIT = "whole"

# Variant (lowercase) -> canonical unit
UNIT_ALIASES = {
    # Volume
    "cup": "cups",
    "cups": "cups",
    "c": "cups",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "tbsp": "tbsp",
    "tbs": "tbsp",
    "tb": "tbsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tsp": "tsp",
    "ts": "tsp",
    "milliliter": "ml",
    "milliliters": "ml",
    "ml": "ml",
    "liter": "L",
    "liters": "L",
    "l": "L",
    # Weight
    "ounce": "oz",
    "ounces": "oz",
    "oz": "oz",
    "pound": "lb",
    "pounds": "lb",
    "lb": "lb",
    "lbs": "lb",
    "gram": "g",
    "grams": "g",
    "g": "g",
    "kilogram": "kg",
    "kilograms": "kg",
    "kg": "kg",
    # Count
    "piece": "pcs",
    "pieces": "pcs",
    "pcs": "pcs",
    "whole": "whole",
    "slice": "slices",
    "slices": "slices",
    "clove": "cloves",
    "cloves": "cloves",
    "can": "cans",
    "cans": "cans",
    "bag": "bags",
    "bags": "bags",
    "stick": "sticks",
    "sticks": "sticks",
    "bunch": "bunch",
    "bunches": "bunch",
    # Size
    "large": "large",
    "medium": "medium",
    "small": "small",
    # Tiny amounts
    "pinch": "pinch",
    "pinches": "pinch",
    "dash": "dash",
    "dashes": "dash",
}

# Alternation for the ingredient-line regex. Longest aliases first so "tbsp"
# wins over "tb" and "cups" over "c"; bare "c" must stand alone as a word.
UNIT_PATTERN = "|".join(
    re.escape(alias) + (r"\b" if alias == "c" else "")
    for alias in sorted(UNIT_ALIASES, key=lambda a: (-len(a), a))
)


def normalize_unit(raw_unit: str) -> str:
    """Map a raw unit word to its canonical token; unknown words become 'whole'."""
    if not raw_unit:
        return DEFAULT_UNIT
    key = raw_unit.strip().lower()
    if key.endswith("."):
        key = key[:-1]
    return UNIT_ALIASES.get(key, DEFAULT_UNIT)
