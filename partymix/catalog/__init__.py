"""
Cocktail Catalog

Read-only reference data built once at import time from the literal
tables in `recipes.py` and `missions.py`.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from partymix.catalog.missions import DEFAULT_MISSION_PACK, MISSION_PACKS
from partymix.catalog.recipes import RECIPE_DATA
from partymix.exceptions import CatalogError
from partymix.models.mission import MissionPool
from partymix.models.recipe import Recipe

logger = logging.getLogger(__name__)


def validate_catalog(recipes: Sequence[Recipe]) -> None:
    """
    Check catalog invariants.

    Raises:
        CatalogError: on a duplicate id or a recipe with no ingredients
    """
    seen = set()
    for recipe in recipes:
        if recipe.id in seen:
            raise CatalogError(
                f"Duplicate recipe id: {recipe.id}",
                details={"recipe_id": recipe.id}
            )
        seen.add(recipe.id)

        if not recipe.ingredients:
            raise CatalogError(
                f"Recipe has no ingredients: {recipe.id}",
                details={"recipe_id": recipe.id}
            )


def load_recipes(data: Sequence[dict]) -> Tuple[Recipe, ...]:
    """Build and validate recipes from literal dicts."""
    recipes = tuple(Recipe.model_validate(entry) for entry in data)
    validate_catalog(recipes)
    return recipes


RECIPES: Tuple[Recipe, ...] = load_recipes(RECIPE_DATA)
_RECIPES_BY_ID: Dict[str, Recipe] = {r.id: r for r in RECIPES}


def get_recipes() -> Tuple[Recipe, ...]:
    """All recipes, in display order."""
    return RECIPES


def list_mission_packs() -> List[str]:
    return list(MISSION_PACKS)


def get_mission_pool(pack: str = DEFAULT_MISSION_PACK) -> MissionPool:
    """
    Build the mission pool for a named pack.

    Raises:
        CatalogError: if the pack does not exist
    """
    if pack not in MISSION_PACKS:
        raise CatalogError(
            f"Unknown mission pack: {pack}",
            details={"pack": pack, "available": list_mission_packs()}
        )

    common, by_recipe = MISSION_PACKS[pack]
    unknown = [rid for rid in by_recipe if rid not in _RECIPES_BY_ID]
    if unknown:
        logger.warning(f"Mission pack '{pack}' has missions for unknown recipes: {unknown}")

    return MissionPool(
        name=pack,
        common=tuple(common),
        by_recipe={rid: tuple(missions) for rid, missions in by_recipe.items()},
    )


__all__ = [
    "RECIPES",
    "validate_catalog",
    "load_recipes",
    "get_recipes",
    "list_mission_packs",
    "get_mission_pool",
]
