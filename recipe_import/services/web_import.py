"""
Import a recipe from a web page.
Prefers schema.org Recipe JSON-LD; falls back to stripping the page to text
and running the text parser.
"""
import json
import logging
import re
from typing import Any, List, Optional

import httpx
from bs4 import BeautifulSoup

from recipe_import.config import settings
from recipe_import.models import NormalizedRecipe
from recipe_import.services.parser import parse_recipe_text
from recipe_import.services.structured import has_type, parse_structured_recipe

logger = logging.getLogger(__name__)

# Browser-like headers so some sites don't return 403 for bots
DEFAULT_HEADERS = {
    "User-Agent": settings.FETCH_USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

# Elements whose end starts a new line of page text
BLOCK_TAGS = [
    "p", "div", "li", "tr", "h1", "h2", "h3", "h4", "h5", "h6",
    "section", "article", "header", "footer", "blockquote", "dt", "dd", "figcaption",
]
NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]


class RecipeImportError(Exception):
    """Base class for failures before the parser ever runs."""


class FetchFailedError(RecipeImportError):
    """The page could not be downloaded."""


class NoRecipeFoundError(RecipeImportError):
    """The page had no recipe data and too little text to parse."""


def _json_ld_blocks(soup: BeautifulSoup) -> List[Any]:
    blocks = []
    for script in soup.find_all("script", type="application/ld+json"):
        raw = script.string or script.get_text()
        if not raw or not raw.strip():
            continue
        try:
            blocks.append(json.loads(raw))
        except json.JSONDecodeError as e:
            logger.debug(f"Skipping malformed JSON-LD block: {e}")
    return blocks


def extract_json_ld(html: str) -> List[Any]:
    """Every parseable application/ld+json block on the page, in document order."""
    return _json_ld_blocks(BeautifulSoup(html, "html.parser"))


def find_recipe(blocks: List[Any]) -> Optional[dict]:
    """
    Locate the Recipe node among JSON-LD blocks.

    Handles a bare Recipe object, an "@graph" container and a top-level array.
    """
    for data in blocks:
        if has_type(data, "Recipe"):
            return data
        if isinstance(data, dict) and isinstance(data.get("@graph"), list):
            found = next((item for item in data["@graph"] if has_type(item, "Recipe")), None)
            if found:
                return found
        if isinstance(data, list):
            found = next((item for item in data if has_type(item, "Recipe")), None)
            if found:
                return found
    return None


def _page_text(soup: BeautifulSoup) -> str:
    # Mutates the soup: non-content elements are removed
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for block in soup.find_all(BLOCK_TAGS):
        block.append("\n")

    text = soup.get_text().replace("\xa0", " ")
    lines = (re.sub(r"\s+", " ", line).strip() for line in text.splitlines())
    return "\n".join(line for line in lines if line)


def html_to_text(html: str) -> str:
    """Page text with markup removed, one line per block element."""
    return _page_text(BeautifulSoup(html, "html.parser"))


def import_recipe_from_html(html: str) -> NormalizedRecipe:
    """
    Build a recipe draft from page HTML.

    Raises:
        NoRecipeFoundError: no Recipe JSON-LD and the stripped text is too short
    """
    soup = BeautifulSoup(html, "html.parser")
    recipe = find_recipe(_json_ld_blocks(soup))
    if recipe is not None:
        logger.info("Found schema.org Recipe data, using structured import")
        return parse_structured_recipe(recipe)

    text = _page_text(soup)
    if len(text) < settings.MIN_TEXT_LENGTH:
        raise NoRecipeFoundError("Page contains no recipe data")
    logger.info(f"No structured data, parsing {len(text)} chars of page text")
    return parse_recipe_text(text)


async def fetch_page_html(url: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """
    Download a page, following redirects.

    Raises:
        FetchFailedError: on network errors or a non-2xx response
    """
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(
            follow_redirects=True,
            headers=DEFAULT_HEADERS,
            timeout=settings.FETCH_TIMEOUT_SECONDS,
        )
    try:
        resp = await client.get(url)
        resp.raise_for_status()
    except (httpx.HTTPStatusError, httpx.RequestError) as e:
        logger.warning(f"Fetching {url} failed: {e}")
        raise FetchFailedError(f"Could not fetch {url}") from e
    finally:
        if owns_client:
            await client.aclose()
    return resp.text[: settings.MAX_HTML_BYTES]


async def import_recipe_from_url(url: str, client: Optional[httpx.AsyncClient] = None) -> NormalizedRecipe:
    """Fetch a recipe page and import it (structured data first, then page text)."""
    html = await fetch_page_html(url, client=client)
    return import_recipe_from_html(html)
