"""
Junk-line classification for scraped or pasted recipe text.

Recipe pages surround the actual content with metadata summaries ("Prep Time"),
nutrition boxes, share/print buttons and sub-recipe labels ("For the glaze:").
Those lines must never become ingredients, and they must never be picked as
the recipe title.
"""
import re

METADATA_LINE_RE = re.compile(
    r"^(prep|cook|total|course|cuisine|servings?|calories?|yield|makes?|author|submitted"
    r"|rated?|rating|reviews?|print|save|share|pin|jump to|skip to|advertisement|sponsored"
    r"|nutrition(?:al)?\s*(?:info|facts)?|keywords?|description|summary|equipment|tools needed)\b",
    re.IGNORECASE,
)
METADATA_COMBO_RE = re.compile(
    r"^(prep\s+cook\s+total|course\s+cuisine|servings?\s+calories?|prep\s+time|cook\s+time|total\s+time)\s*$",
    re.IGNORECASE,
)
TIME_ONLY_RE = re.compile(r"^(\d+\s*(mins?|minutes?|hrs?|hours?|h|m)\s*)+$", re.IGNORECASE)
TIME_PAIR_RE = re.compile(
    r"^\d+\s*(mins?|minutes?|hrs?|hours?)\s+\d+\s*(mins?|minutes?|hrs?|hours?)",
    re.IGNORECASE,
)
SUB_SECTION_RE = re.compile(
    r"^(for\s+the\s+.+|fillings?|toppings?|frosting|icing|glaze|ganache|garnish|assembly"
    r"|decoration|sauce|crust|base|meringue|batter|dough|filling ingredients?|macaron shells?)\s*:?\s*$",
    re.IGNORECASE,
)
ALL_CAPS_LABEL_RE = re.compile(r"^[A-Z\s]+$")

METADATA_LABEL_WORDS = frozenset(
    {
        "prep",
        "cook",
        "total",
        "course",
        "cuisine",
        "servings",
        "calories",
        "time",
        "yield",
        "makes",
        "nutrition",
        "print",
        "save",
        "share",
    }
)


def _is_caps_label(line: str) -> bool:
    # e.g. "COURSE", "PREP TIME"
    if len(line) >= 20 or not ALL_CAPS_LABEL_RE.match(line):
        return False
    words = line.lower().split()
    if len(words) > 3:
        return False
    return any(word in METADATA_LABEL_WORDS for word in words)


def is_junk_line(line: str) -> bool:
    """Return True if the line is page furniture or metadata rather than recipe content."""
    text = line.strip()
    return bool(
        METADATA_LINE_RE.match(text)
        or METADATA_COMBO_RE.match(text)
        or TIME_ONLY_RE.match(text)
        or SUB_SECTION_RE.match(text)
        or TIME_PAIR_RE.match(text)
        or _is_caps_label(text)
    )
