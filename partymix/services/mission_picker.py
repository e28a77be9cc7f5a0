"""
Mission Picker

Draws one party mission for a recipe from the shared pool plus that
recipe's own missions.
"""

import logging
import random
from typing import List, Optional, Sequence, TypeVar

from partymix.exceptions import EmptyPoolError
from partymix.models.mission import MissionPool

logger = logging.getLogger(__name__)

T = TypeVar("T")


def random_from(items: Sequence[T], rng: Optional[random.Random] = None) -> T:
    """
    Uniform pick over `items`.

    Raises:
        EmptyPoolError: if `items` is empty
    """
    if not items:
        raise EmptyPoolError()

    rng = rng or random
    return items[int(rng.random() * len(items))]


def mission_candidates(pool: MissionPool, recipe_id: str) -> List[str]:
    """Shared missions followed by the ones specific to `recipe_id`."""
    return pool.candidates(recipe_id)


def pick_mission(
    pool: MissionPool,
    recipe_id: Optional[str] = None,
    default_id: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Draw a mission for a recipe.

    Args:
        pool: Mission pool to draw from
        recipe_id: Selected recipe; falls back to `default_id` when None
        default_id: Catalog's first recipe id
        rng: Random source (module-level `random` when None)

    Returns:
        One mission string
    """
    key = recipe_id or default_id or ""
    candidates = mission_candidates(pool, key)
    mission = random_from(candidates, rng)

    logger.debug(f"Drew mission for '{key}' from {len(candidates)} candidates")
    return mission
