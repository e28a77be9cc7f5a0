"""
Party Session

Selection state for one user: the picked recipe and the mission on
screen. Picking a different recipe always draws a fresh mission.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from partymix.models.export import CopyResult
from partymix.models.mission import MissionPool
from partymix.models.recipe import Recipe
from partymix.services.mission_picker import pick_mission
from partymix.services.recipe_exporter import export_recipe

logger = logging.getLogger(__name__)


@dataclass
class PartySession:
    """Picked recipe id (or None) plus the mission currently displayed."""
    recipes: Sequence[Recipe]
    pool: MissionPool
    rng: Optional[random.Random] = None
    picked_id: Optional[str] = None
    mission: str = ""
    _by_id: Dict[str, Recipe] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        self._by_id = {r.id: r for r in self.recipes}

    @property
    def default_id(self) -> Optional[str]:
        return self.recipes[0].id if self.recipes else None

    @property
    def recipe(self) -> Optional[Recipe]:
        """The picked recipe, or None."""
        if self.picked_id is None:
            return None
        return self._by_id.get(self.picked_id)

    def start(self) -> None:
        """Pick the first recipe on first render; later calls do nothing."""
        if self.picked_id is None and self.recipes:
            self.select(self.default_id)

    def select(self, recipe_id: str) -> None:
        """Pick a recipe and draw its mission. Re-picking the same one is a no-op."""
        if recipe_id == self.picked_id:
            return

        if recipe_id not in self._by_id:
            logger.warning(f"Selected recipe not in catalog: {recipe_id}")

        self.picked_id = recipe_id
        self.reroll()
        logger.info(f"Selected recipe {recipe_id}")

    def reroll(self) -> str:
        """Draw a new mission for the picked recipe (or the first one)."""
        self.mission = pick_mission(
            self.pool,
            recipe_id=self.picked_id,
            default_id=self.default_id,
            rng=self.rng,
        )
        return self.mission

    def export(self) -> CopyResult:
        """Copy the current recipe and mission to the clipboard."""
        return export_recipe(self.recipe, self.mission)
