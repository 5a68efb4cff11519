"""
Metadata and enrichment: servings, timings, category and auto-tags.
Runs over the whole normalized text, not just the section buckets.
"""
import logging
import re
from typing import Iterable, List, Optional

from recipe_import.models import Category
from recipe_import.services.quantity_parser import parse_int

logger = logging.getLogger(__name__)

DEFAULT_SERVINGS = 12
DEFAULT_PREP_MINUTES = 15
DEFAULT_COOK_MINUTES = 20
MAX_TAGS = 6

SERVINGS_RE = re.compile(r"(?:serves?|servings?|yield|makes?)\s*:?\s*(\d+)", re.IGNORECASE)
PREP_TIME_RE = re.compile(r"prep(?:aration)?\s*(?:time)?\s*:?\s*(\d+)\s*(?:min|m\b)", re.IGNORECASE)
COOK_TIME_RE = re.compile(
    r"(?:cook(?:ing)?|bak(?:e|ing))\s*(?:time)?\s*:?\s*(\d+)\s*(?:min|m\b)", re.IGNORECASE
)
TOTAL_TIME_RE = re.compile(
    r"total\s*(?:time)?\s*:?\s*(?:(\d+)\s*h(?:ours?)?)?[\s,]*(\d+)\s*(?:min|m\b)", re.IGNORECASE
)

# First match wins, so order matters: "cookie bars" are Cookies, not Brownies & Bars.
CATEGORY_KEYWORDS = (
    (Category.COOKIES, re.compile(r"cookie|biscuit")),
    (Category.CAKES, re.compile(r"cake|cupcake|bundt")),
    (Category.BREAD, re.compile(r"bread|loaf|roll|bun|sourdough|yeast")),
    (Category.BROWNIES_AND_BARS, re.compile(r"brownie|blondie|bar")),
    (Category.PIES_AND_TARTS, re.compile(r"pie|tart|galette|crust")),
    (Category.PASTRIES, re.compile(r"pastry|croissant|puff|danish|eclair|choux")),
    (Category.BREAKFAST, re.compile(r"pancake|waffle|scone|muffin|breakfast|brunch|granola|oatmeal")),
)

TAG_KEYWORDS = (
    "chocolate",
    "vanilla",
    "lemon",
    "blueberry",
    "strawberry",
    "apple",
    "banana",
    "cinnamon",
    "peanut butter",
    "cream cheese",
    "pumpkin",
    "caramel",
    "coconut",
    "honey",
    "oat",
    "almond",
    "pecan",
    "walnut",
    "raspberry",
    "cherry",
    "ginger",
    "maple",
    "nutella",
)


def extract_servings(text: str) -> int:
    match = SERVINGS_RE.search(text)
    if not match:
        return DEFAULT_SERVINGS
    servings = parse_int(match.group(1), DEFAULT_SERVINGS)
    # "Makes 0" is never a real yield
    return servings if servings > 0 else DEFAULT_SERVINGS


def extract_prep_time(text: str) -> int:
    match = PREP_TIME_RE.search(text)
    return parse_int(match.group(1), DEFAULT_PREP_MINUTES) if match else DEFAULT_PREP_MINUTES


def extract_total_time(text: str) -> Optional[int]:
    """Total time in minutes ("Total Time: 1 hour 15 mins" -> 75), or None."""
    match = TOTAL_TIME_RE.search(text)
    if not match:
        return None
    hours = parse_int(match.group(1) or "0", None)
    minutes = parse_int(match.group(2), None)
    if hours is None or minutes is None:
        return None
    return hours * 60 + minutes


def extract_cook_time(text: str) -> int:
    """
    Cook time in minutes.

    An explicit cook/bake time always wins; total time is consulted only when
    there is none, and the default applies when neither is present.
    """
    match = COOK_TIME_RE.search(text)
    if match:
        return parse_int(match.group(1), DEFAULT_COOK_MINUTES)
    total = extract_total_time(text)
    if total is not None:
        logger.debug(f"No explicit cook time, using total time {total} min")
        return total
    return DEFAULT_COOK_MINUTES


def _combined_text(name: str, ingredient_names: Iterable[str]) -> str:
    return (name + " " + " ".join(ingredient_names)).lower()


def guess_category(name: str, ingredient_names: Iterable[str]) -> Category:
    """Pick a category from keywords in the title and ingredient names."""
    combined = _combined_text(name, ingredient_names)
    for category, pattern in CATEGORY_KEYWORDS:
        if pattern.search(combined):
            return category
    return Category.OTHER


def generate_tags(name: str, ingredient_names: Iterable[str], category: Category) -> List[str]:
    """
    Category slug first, then flavor keywords in list order, capped at MAX_TAGS.

    The name and each ingredient name are searched separately, so a keyword
    never matches across two of them.
    """
    texts = [name.lower()] + [ingredient.lower() for ingredient in ingredient_names]
    tags = [category.slug]
    for keyword in TAG_KEYWORDS:
        if keyword not in tags and any(keyword in text for text in texts):
            tags.append(keyword)
    return tags[:MAX_TAGS]
