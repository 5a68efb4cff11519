"""
Imports router: turn pasted text, structured data, page HTML or a URL into a recipe draft.
Nothing is persisted; the client reviews the draft and saves it itself.
"""
import logging
from typing import Any, Dict
from urllib.parse import urlparse

from fastapi import APIRouter, Body
from pydantic import BaseModel, Field

from recipe_import.error_handler import APIError
from recipe_import.models import NormalizedRecipe
from recipe_import.services.parser import parse_recipe_text
from recipe_import.services.structured import parse_structured_recipe
from recipe_import.services.web_import import (
    FetchFailedError,
    NoRecipeFoundError,
    import_recipe_from_html,
    import_recipe_from_url,
)

logger = logging.getLogger(__name__)
router = APIRouter()


# Request models
class TextImportRequest(BaseModel):
    """Raw recipe text (pasted, scraped or extracted from a document)."""

    text: str = ""


class HtmlImportRequest(BaseModel):
    """Recipe page markup."""

    html: str = Field(..., description="Full page HTML")


class UrlImportRequest(BaseModel):
    """Recipe page address."""

    url: str


@router.post("/text", response_model=NormalizedRecipe)
def import_text(request: TextImportRequest) -> NormalizedRecipe:
    """Parse free-form recipe text into a draft."""
    recipe = parse_recipe_text(request.text)
    APIError.log_operation_success("import_text", {"recipe_name": recipe.name})
    return recipe


@router.post("/structured", response_model=NormalizedRecipe)
def import_structured(recipe: Dict[str, Any] = Body(...)) -> NormalizedRecipe:
    """Map a schema.org Recipe object into a draft."""
    result = parse_structured_recipe(recipe)
    APIError.log_operation_success("import_structured", {"recipe_name": result.name})
    return result


@router.post("/html", response_model=NormalizedRecipe)
def import_html(request: HtmlImportRequest) -> NormalizedRecipe:
    """Import from page markup: JSON-LD first, stripped page text otherwise."""
    try:
        recipe = import_recipe_from_html(request.html)
    except NoRecipeFoundError as e:
        raise APIError.handle_no_recipe_error("html", e)
    APIError.log_operation_success("import_html", {"recipe_name": recipe.name})
    return recipe


@router.post("/url", response_model=NormalizedRecipe)
async def import_url(request: UrlImportRequest) -> NormalizedRecipe:
    """
    Fetch a recipe page and import it.

    Returns:
        Recipe draft; 400 for a non-http(s) URL, 502 if the page cannot be
        fetched, 422 if it holds no recipe
    """
    parsed = urlparse(request.url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise APIError.handle_validation_error(
            "import_url", ValueError(f"Unsupported URL: {request.url}")
        )

    logger.info(f"Importing recipe from {request.url}")
    try:
        recipe = await import_recipe_from_url(request.url)
    except FetchFailedError as e:
        raise APIError.handle_fetch_error(request.url, e)
    except NoRecipeFoundError as e:
        raise APIError.handle_no_recipe_error(request.url, e)
    APIError.log_operation_success("import_url", {"url": request.url, "recipe_name": recipe.name})
    return recipe
