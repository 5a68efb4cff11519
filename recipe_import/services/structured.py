"""
Adapter from schema.org Recipe objects (JSON-LD) to the normalized recipe record.
Bypasses line segmentation but shares ingredient parsing, step numbering,
category guessing and tagging with the text parser.
"""
import logging
import math
import re
from typing import Any, List, Mapping, Optional

from recipe_import.models import PLACEHOLDER_INGREDIENT, Ingredient, NormalizedRecipe
from recipe_import.services.ingredient_parser import parse_ingredient_line
from recipe_import.services.metadata import (
    DEFAULT_COOK_MINUTES,
    DEFAULT_PREP_MINUTES,
    DEFAULT_SERVINGS,
    generate_tags,
    guess_category,
)
from recipe_import.services.parser import PLACEHOLDER_NAME, number_steps
from recipe_import.services.quantity_parser import parse_int

logger = logging.getLogger(__name__)

DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")
FIRST_INTEGER_RE = re.compile(r"(\d+)")


def has_type(item: Any, type_name: str) -> bool:
    """True if a JSON-LD node's @type is type_name or a list containing it."""
    if not isinstance(item, Mapping):
        return False
    node_type = item.get("@type")
    if isinstance(node_type, list):
        return type_name in node_type
    return node_type == type_name


def parse_duration(duration: Any) -> int:
    """ISO-8601 duration ("PT1H15M") to minutes; 0 when absent or unreadable."""
    if not duration or not isinstance(duration, str):
        return 0
    match = DURATION_RE.search(duration)
    if not match:
        return 0
    hours = parse_int(match.group(1) or "0", None)
    minutes = parse_int(match.group(2) or "0", None)
    if hours is None or minutes is None:
        return 0
    return hours * 60 + minutes


def parse_yield(recipe_yield: Any) -> int:
    """First integer in recipeYield ("Makes 24 cookies" -> 24), default 12."""
    if recipe_yield is None or isinstance(recipe_yield, bool):
        return DEFAULT_SERVINGS
    if isinstance(recipe_yield, int):
        return recipe_yield if recipe_yield >= 1 else DEFAULT_SERVINGS
    if isinstance(recipe_yield, float):
        if not math.isfinite(recipe_yield) or recipe_yield < 1:
            return DEFAULT_SERVINGS
        return int(recipe_yield)
    if isinstance(recipe_yield, list):
        if not recipe_yield:
            return DEFAULT_SERVINGS
        return parse_yield(recipe_yield[0])
    match = FIRST_INTEGER_RE.search(str(recipe_yield))
    servings = parse_int(match.group(1), 0) if match else 0
    return servings if servings > 0 else DEFAULT_SERVINGS


def parse_image(image: Any) -> Optional[str]:
    """Image URL from a string, a list (of strings or ImageObjects) or an ImageObject."""
    if not image:
        return None
    if isinstance(image, str):
        return image
    if isinstance(image, list):
        first = image[0]
        if isinstance(first, str):
            return first
        return parse_image(first) if isinstance(first, Mapping) else None
    if isinstance(image, Mapping):
        url = image.get("url")
        return url if isinstance(url, str) and url else None
    return None


def _step_text(step: Any) -> str:
    if isinstance(step, str):
        return step
    if isinstance(step, Mapping):
        text = step.get("text") or step.get("name") or ""
        return text if isinstance(text, str) else ""
    return ""


def _section_steps(section: Mapping[str, Any]) -> List[Any]:
    # A lone step or string is a one-step section
    elements = section.get("itemListElement")
    if isinstance(elements, (str, Mapping)):
        return [elements]
    return elements if isinstance(elements, list) else []


def flatten_instructions(instructions: Any) -> str:
    """
    Flatten recipeInstructions into one numbered string.

    Accepts a plain string (one step per line), a list of strings, HowToStep
    objects, and HowToSection objects whose itemListElement holds the steps.
    """
    if not instructions:
        return ""
    if isinstance(instructions, str):
        return number_steps(instructions.splitlines())
    if not isinstance(instructions, list):
        return ""

    steps: List[str] = []
    for item in instructions:
        if has_type(item, "HowToSection"):
            steps.extend(_step_text(step) for step in _section_steps(item))
        else:
            steps.append(_step_text(item))
    return number_steps(steps)


def parse_ingredients(recipe_ingredient: Any) -> List[Ingredient]:
    if isinstance(recipe_ingredient, str):
        recipe_ingredient = [recipe_ingredient]
    if not isinstance(recipe_ingredient, list):
        return []
    ingredients = []
    for line in recipe_ingredient:
        if not isinstance(line, str):
            continue
        ingredient = parse_ingredient_line(line, skip_junk=False)
        if ingredient is not None:
            ingredients.append(ingredient)
    return ingredients


def parse_structured_recipe(recipe: Mapping[str, Any]) -> NormalizedRecipe:
    """
    Map a schema.org Recipe object onto the normalized recipe record.

    Missing or malformed fields fall back to the same defaults as the text parser.
    """
    raw_name = recipe.get("name")
    name = raw_name.strip() if isinstance(raw_name, str) else ""
    ingredients = parse_ingredients(recipe.get("recipeIngredient"))
    ingredient_names = [ingredient.name for ingredient in ingredients]
    category = guess_category(name, ingredient_names)
    description = recipe.get("description")

    logger.debug(f"Structured recipe '{name}' with {len(ingredients)} ingredients")

    return NormalizedRecipe(
        name=name or PLACEHOLDER_NAME,
        category=category,
        servings=parse_yield(recipe.get("recipeYield")),
        prep_time=parse_duration(recipe.get("prepTime")) or DEFAULT_PREP_MINUTES,
        cook_time=parse_duration(recipe.get("cookTime")) or DEFAULT_COOK_MINUTES,
        ingredients=ingredients or [PLACEHOLDER_INGREDIENT],
        instructions=flatten_instructions(recipe.get("recipeInstructions")),
        tags=generate_tags(name, ingredient_names, category),
        notes=description.strip() if isinstance(description, str) else "",
        photo=parse_image(recipe.get("image")),
    )
