"""
Best-effort recipe import: raw text or schema.org data in, normalized recipe draft out.
"""
from recipe_import.models import Category, Ingredient, NormalizedRecipe
from recipe_import.services.parser import parse_recipe_text
from recipe_import.services.structured import parse_structured_recipe

__all__ = [
    "Category",
    "Ingredient",
    "NormalizedRecipe",
    "parse_recipe_text",
    "parse_structured_recipe",
]
