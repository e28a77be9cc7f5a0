"""
PartyMix Core Package

Cocktail catalog, mission drawing, and recipe text export.
No framework dependencies (Streamlit) in this package.
"""

__version__ = "1.0.0"

from partymix.models.common import Unit
from partymix.models.export import CopyResult
from partymix.models.mission import MissionPool
from partymix.models.recipe import Ingredient, Recipe

__all__ = [
    "Unit",
    "Ingredient",
    "Recipe",
    "MissionPool",
    "CopyResult",
]
