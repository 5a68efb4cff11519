"""
Recipe import Pydantic models - the normalized record every import path returns.
Python attributes are snake_case; JSON uses the camelCase names the UI stores.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Category(str, Enum):
    """Closed set of recipe categories."""
    COOKIES = "Cookies"
    CAKES = "Cakes"
    BREAKFAST = "Breakfast"
    BREAD = "Bread"
    BROWNIES_AND_BARS = "Brownies & Bars"
    PIES_AND_TARTS = "Pies & Tarts"
    PASTRIES = "Pastries"
    OTHER = "Other"

    @property
    def slug(self) -> str:
        """Tag form of the category, e.g. 'brownies-bars'."""
        return self.value.lower().replace(" & ", "-")


class Ingredient(BaseModel):
    """A quantified ingredient line."""
    amount: float = Field(1, ge=0, description="Decimal amount rounded to 3 places")
    unit: str = Field("whole", description="Canonical unit token")
    name: str = ""

    class Config:
        frozen = True


PLACEHOLDER_INGREDIENT = Ingredient(amount=1, unit="cups", name="")


class NormalizedRecipe(BaseModel):
    """Best-effort recipe draft produced by every import path."""
    name: str = Field("Imported Recipe", min_length=1)
    category: Category = Category.OTHER
    servings: int = Field(12, gt=0)
    prep_time: int = Field(15, ge=0, alias="prepTime", description="Minutes")
    cook_time: int = Field(20, ge=0, alias="cookTime", description="Minutes")
    ingredients: List[Ingredient] = Field(default_factory=lambda: [PLACEHOLDER_INGREDIENT], min_length=1)
    instructions: str = ""
    tags: List[str] = Field(default_factory=list, max_length=6)
    notes: str = ""
    favorite: bool = False
    last_made: Optional[str] = Field(None, alias="lastMade")
    photo: Optional[str] = None

    class Config:
        frozen = True
        populate_by_name = True

    def to_json_dict(self) -> dict:
        """Serialize with camelCase keys and the category as its label."""
        return self.model_dump(mode="json", by_alias=True)
