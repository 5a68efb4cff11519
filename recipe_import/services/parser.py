"""
Deterministic recipe parser for unstructured recipe text.
Uses header patterns to bucket lines into ingredients/instructions/notes, and
falls back to per-line heuristics when the text has no recognizable headers.
"""
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from recipe_import.models import PLACEHOLDER_INGREDIENT, Ingredient, NormalizedRecipe
from recipe_import.services.ingredient_parser import parse_ingredient_line
from recipe_import.services.junk_filter import is_junk_line
from recipe_import.services.metadata import (
    extract_cook_time,
    extract_prep_time,
    extract_servings,
    generate_tags,
    guess_category,
)
from recipe_import.services.quantity_parser import QUANTITY_START_RE

logger = logging.getLogger(__name__)

PLACEHOLDER_NAME = "Imported Recipe"


class Section(str, Enum):
    """Which bucket the segmenter is currently filling."""

    NONE = "none"
    INGREDIENTS = "ingredients"
    INSTRUCTIONS = "instructions"
    NOTES = "notes"


@dataclass(frozen=True)
class SectionBuckets:
    """Lines collected per section during one parse."""

    ingredients: Tuple[str, ...] = ()
    instructions: Tuple[str, ...] = ()
    notes: Tuple[str, ...] = ()


# Whole-line section headers, optional trailing colon
SECTION_HEADERS = (
    (
        Section.INGREDIENTS,
        re.compile(r"^(ingredients|what you.?ll need|you.?ll need|shopping list)\s*:?\s*$", re.IGNORECASE),
    ),
    (
        Section.INSTRUCTIONS,
        re.compile(
            r"^(instructions|directions|method|steps|preparation|how to make|procedure)\s*:?\s*$",
            re.IGNORECASE,
        ),
    ),
    (
        Section.NOTES,
        re.compile(r"^(notes|tips|chef.?s? notes?|cook.?s? notes?|variations?)\s*:?\s*$", re.IGNORECASE),
    ),
)
# "Ingredients: 2 cups flour" - label and content on one line
INLINE_HEADER_RE = re.compile(
    r"^(ingredients|instructions|directions|method|steps|notes|tips)\s*:\s*(.+)", re.IGNORECASE
)

URL_PREFIXES = ("http", "www.")
NAVIGATION_RE = re.compile(
    r"^(print|skip to|jump to|home|menu|search|log ?in|sign ?up|advertisement)\b", re.IGNORECASE
)
TRAILING_RECIPE_RE = re.compile(r"\s*\brecipe\s*$", re.IGNORECASE)
MAX_TITLE_CONTINUATIONS = 2
MAX_TITLE_CONTINUATION_LENGTH = 40

STEP_NUMBER_RE = re.compile(r"^\d+[.)]\s*")
NUMBERED_STEP_RE = re.compile(r"^\d+\.\s")
COOKING_VERB_RE = re.compile(
    r"\b(mix|stir|bake|cook|heat|add|pour|fold|whisk|combine|preheat|beat|cream|roll|spread|set"
    r"|let|remove|cool|place|transfer|melt|knead|simmer|boil|fry|saut[eé]|blend|chop|dice|slice"
    r"|grate|brush|grease|line|sift|drain|cover|chill|refrigerate|freeze)\b",
    re.IGNORECASE,
)
MAX_FALLBACK_INGREDIENT_LENGTH = 80
MIN_FALLBACK_INSTRUCTION_LENGTH = 40


def normalize_text(raw_text: str) -> str:
    """Unify line endings, turn tabs into spaces and collapse runs of spaces."""
    text = raw_text.replace("\r\n", "\n").replace("\t", " ")
    text = re.sub(r" {2,}", " ", text)
    return text.strip()


def split_lines(text: str) -> List[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def match_section_header(line: str) -> Optional[Section]:
    for section, pattern in SECTION_HEADERS:
        if pattern.match(line):
            return section
    return None


def _inline_section(label: str) -> Section:
    label = label.lower()
    if "ingredient" in label:
        return Section.INGREDIENTS
    if "note" in label or "tip" in label:
        return Section.NOTES
    return Section.INSTRUCTIONS


def _is_title_candidate(line: str) -> bool:
    lower = line.lower()
    if lower.startswith(URL_PREFIXES):
        return False
    if NAVIGATION_RE.match(lower):
        return False
    if is_junk_line(line):
        return False
    return 3 < len(line) < 120


def _continues_title(line: str) -> bool:
    if len(line) > MAX_TITLE_CONTINUATION_LENGTH or len(line) < 2:
        return False
    if is_junk_line(line) or QUANTITY_START_RE.match(line):
        return False
    if INLINE_HEADER_RE.match(line):
        return False
    return match_section_header(line) is None


def extract_title(lines: List[str]) -> str:
    """
    Best-guess title: the first line that is not a URL, navigation text or
    metadata, minus a trailing "recipe". Up to two short follow-on lines are
    joined on, since PDF and page text extraction often wraps long titles.

    Returns an empty string if nothing qualifies.
    """
    for index, line in enumerate(lines):
        if not _is_title_candidate(line):
            continue
        parts = [TRAILING_RECIPE_RE.sub("", line)]
        for follow in lines[index + 1 : index + 1 + MAX_TITLE_CONTINUATIONS]:
            if not _continues_title(follow):
                break
            parts.append(follow)
        return " ".join(part for part in parts if part).strip()
    return ""


def segment_sections(lines: Iterable[str]) -> SectionBuckets:
    """
    Bucket lines by the most recent section header.

    Lines before the first header are ignored unless one of them is an inline
    "Label: content" header, which opens that section.
    """
    buckets = {Section.INGREDIENTS: [], Section.INSTRUCTIONS: [], Section.NOTES: []}
    current = Section.NONE

    for line in lines:
        header = match_section_header(line)
        if header is not None:
            current = header
            continue

        if current is Section.NONE:
            inline = INLINE_HEADER_RE.match(line)
            if inline:
                current = _inline_section(inline.group(1))
                content = inline.group(2).strip()
                if content:
                    buckets[current].append(content)
            continue

        buckets[current].append(line)

    return SectionBuckets(
        ingredients=tuple(buckets[Section.INGREDIENTS]),
        instructions=tuple(buckets[Section.INSTRUCTIONS]),
        notes=tuple(buckets[Section.NOTES]),
    )


def number_steps(steps: Iterable[str]) -> str:
    """Drop any existing "1." / "2)" prefix and renumber from 1, one step per line."""
    cleaned = [STEP_NUMBER_RE.sub("", step.strip()).strip() for step in steps]
    return "\n".join(f"{i}. {step}" for i, step in enumerate((s for s in cleaned if s), start=1))


def parse_ingredient_lines(lines: Iterable[str]) -> List[Ingredient]:
    ingredients = []
    for line in lines:
        if len(line) <= 1 or is_junk_line(line):
            continue
        ingredient = parse_ingredient_line(line)
        if ingredient is not None:
            ingredients.append(ingredient)
    return ingredients


def _looks_like_ingredient(line: str) -> bool:
    return bool(QUANTITY_START_RE.match(line)) and len(line) < MAX_FALLBACK_INGREDIENT_LENGTH


def _looks_like_instruction(line: str) -> bool:
    if NUMBERED_STEP_RE.match(line):
        return True
    return len(line) > MIN_FALLBACK_INSTRUCTION_LENGTH and bool(COOKING_VERB_RE.search(line))


def fallback_segment(lines: Iterable[str]) -> SectionBuckets:
    """
    Header-free classification, one line at a time.

    The ingredient test runs first, so a short numbered step such as
    "1. Preheat the oven" is claimed as an ingredient.
    """
    ingredients = []
    instructions = []
    for line in lines:
        if is_junk_line(line):
            continue
        if _looks_like_ingredient(line):
            ingredients.append(line)
        elif _looks_like_instruction(line):
            instructions.append(line)
    return SectionBuckets(ingredients=tuple(ingredients), instructions=tuple(instructions))


def parse_recipe_text(raw_text: Optional[str]) -> NormalizedRecipe:
    """
    Turn raw recipe text (pasted, scraped or extracted) into a recipe draft.

    Never raises on odd input; every field it cannot find gets its default.
    """
    text = normalize_text(raw_text or "")
    lines = split_lines(text)

    name = extract_title(lines)
    buckets = segment_sections(lines)
    logger.debug(
        f"Segmented {len(lines)} lines: {len(buckets.ingredients)} ingredient, "
        f"{len(buckets.instructions)} instruction, {len(buckets.notes)} note lines"
    )

    ingredients = parse_ingredient_lines(buckets.ingredients)
    instructions = number_steps(line for line in buckets.instructions if len(line) > 3)

    if not ingredients and not instructions:
        logger.debug("No sections found, falling back to line heuristics")
        fallback = fallback_segment(lines)
        if fallback.ingredients:
            ingredients = parse_ingredient_lines(fallback.ingredients)
        if fallback.instructions:
            instructions = number_steps(fallback.instructions)

    ingredient_names = [ingredient.name for ingredient in ingredients]
    category = guess_category(name, ingredient_names)

    return NormalizedRecipe(
        name=name or PLACEHOLDER_NAME,
        category=category,
        servings=extract_servings(text),
        prep_time=extract_prep_time(text),
        cook_time=extract_cook_time(text),
        ingredients=ingredients or [PLACEHOLDER_INGREDIENT],
        instructions=instructions,
        tags=generate_tags(name, ingredient_names, category),
        notes="\n".join(buckets.notes),
    )
