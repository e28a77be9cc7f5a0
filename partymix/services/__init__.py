"""
PartyMix Business Logic Services

Pure functions with no framework dependencies, plus the per-user
PartySession that the UI keeps in session state.
"""

from partymix.services.amount_formatter import format_amount, format_ingredient_line
from partymix.services.clipboard import copy_to_clipboard
from partymix.services.mission_picker import mission_candidates, pick_mission, random_from
from partymix.services.party_session import PartySession
from partymix.services.recipe_exporter import build_recipe_text, export_recipe

__all__ = [
    "format_amount",
    "format_ingredient_line",
    "random_from",
    "mission_candidates",
    "pick_mission",
    "build_recipe_text",
    "export_recipe",
    "copy_to_clipboard",
    "PartySession",
]
