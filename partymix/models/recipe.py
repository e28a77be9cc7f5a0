"""
Recipe Data Models

Cocktail recipes are reference data: defined once when the catalog
module is imported and never changed afterwards.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from partymix.models.common import Unit


class Ingredient(BaseModel):
    """A single ingredient line in a recipe."""

    model_config = ConfigDict(frozen=True)

    name: str
    amount: float = Field(..., ge=0, description="Point amount in `unit`")
    unit: Unit
    note: Optional[str] = Field(default=None, description="Shown in parentheses after the amount")

    # e.g. tonic 90-120ml; when set, shown instead of `amount`
    range: Optional[Tuple[float, float]] = Field(default=None, description="(low, high) amount range")

    @field_validator("range")
    @classmethod
    def check_range_order(cls, v):
        if v is not None and v[0] > v[1]:
            raise ValueError(f"range low {v[0]} is greater than high {v[1]}")
        return v


class Recipe(BaseModel):
    """
    A cocktail recipe.

    `id` must be unique across the catalog and `ingredients` must not be
    empty; the catalog checks both when it is loaded.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique catalog key")
    name: str
    tagline: str
    color: str = Field(..., description="CSS colour token for the list swatch and detail bar")
    ingredients: Tuple[Ingredient, ...]
    howto: Optional[Tuple[str, ...]] = Field(default=None, description="Build steps, in order")

    @property
    def has_steps(self) -> bool:
        return bool(self.howto)
