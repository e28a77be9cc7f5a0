"""Data models for PartyMix."""

from partymix.models.common import Unit
from partymix.models.export import CopyResult
from partymix.models.mission import MissionPool
from partymix.models.recipe import Ingredient, Recipe

__all__ = [
    # Common
    "Unit",
    # Recipes
    "Ingredient",
    "Recipe",
    # Missions
    "MissionPool",
    # Export
    "CopyResult",
]
