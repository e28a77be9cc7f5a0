"""Tests for the shipped catalog and mission packs."""

import pytest

from partymix.catalog import (
    get_mission_pool,
    get_recipes,
    list_mission_packs,
    load_recipes,
    validate_catalog,
)
from partymix.exceptions import CatalogError
from partymix.models.recipe import Recipe
from partymix.services.amount_formatter import format_amount
from partymix.services.party_session import PartySession


def shipped_recipe(recipe_id: str) -> Recipe:
    """Look up a shipped recipe by id."""
    return next(r for r in get_recipes() if r.id == recipe_id)


class TestShippedRecipes:
    """Invariants on the built-in catalog."""

    def test_ids_unique(self):
        ids = [r.id for r in get_recipes()]

        assert len(ids) == len(set(ids))

    def test_every_recipe_has_ingredients(self):
        assert all(r.ingredients for r in get_recipes())

    def test_session_starts_on_first_entry(self):
        session = PartySession(recipes=get_recipes(), pool=get_mission_pool())

        session.start()

        assert session.picked_id == "mojito"
        assert session.recipe is shipped_recipe("mojito")

    def test_mojito_tonic_shows_range(self):
        tonic = next(i for i in shipped_recipe("mojito").ingredients if i.name == "토닉")

        assert format_amount(tonic) == "90-120ml"

    def test_mojito_lime_fraction(self):
        lime = next(i for i in shipped_recipe("mojito").ingredients if i.name == "라임")

        assert format_amount(lime) == ".5개"

    def test_recipes_are_frozen(self):
        with pytest.raises(Exception):
            shipped_recipe("mojito").name = "changed"


class TestValidateCatalog:
    """Broken reference data is rejected."""

    def test_duplicate_id(self, sample_recipes):
        with pytest.raises(CatalogError) as exc:
            validate_catalog([sample_recipes[0], sample_recipes[0]])

        assert exc.value.code == "CATALOG_ERROR"
        assert exc.value.details["recipe_id"] == "mojito"

    def test_empty_ingredients(self):
        recipe = Recipe(id="water", name="물", tagline="", color="#000", ingredients=())

        with pytest.raises(CatalogError):
            validate_catalog([recipe])

    def test_load_recipes_from_dicts(self):
        recipes = load_recipes([
            {
                "id": "gin_tonic",
                "name": "진토닉",
                "tagline": "클래식",
                "color": "#0ea5e9",
                "ingredients": [{"name": "진", "amount": 45, "unit": "ml"}],
            }
        ])

        assert recipes[0].howto is None
        assert recipes[0].has_steps is False


class TestMissionPacks:
    """Both packs load and cover every recipe."""

    def test_available_packs(self):
        assert set(list_mission_packs()) == {"classic", "team_night"}

    @pytest.mark.parametrize("pack", ["classic", "team_night"])
    def test_every_recipe_has_specific_missions(self, pack):
        pool = get_mission_pool(pack)

        for recipe in get_recipes():
            assert pool.specific_for(recipe.id), recipe.id

    def test_team_night_keeps_weighted_duplicates(self):
        pool = get_mission_pool("team_night")

        assert pool.common.count("술자리 퀴즈왕 1개 뽑기") == 4

    def test_unknown_pack(self):
        with pytest.raises(CatalogError):
            get_mission_pool("brunch")
