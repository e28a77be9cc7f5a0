"""Mission pool data models."""

from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class MissionPool(BaseModel):
    """
    Party missions to draw from.

    `common` applies to every recipe; `by_recipe` adds missions offered only
    when that recipe is selected. Repeated entries are kept, so a mission
    listed twice is drawn twice as often.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="classic", description="Mission pack name")
    common: Tuple[str, ...]
    by_recipe: Dict[str, Tuple[str, ...]] = Field(default_factory=dict)

    def specific_for(self, recipe_id: str) -> Tuple[str, ...]:
        """Missions tied to `recipe_id`; empty when it has none."""
        return self.by_recipe.get(recipe_id, ())

    def candidates(self, recipe_id: str) -> List[str]:
        """Generic pool followed by the recipe's specific pool."""
        return [*self.common, *self.specific_for(recipe_id)]
