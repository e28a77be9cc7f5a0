"""
Recipe Exporter

Builds the plain-text recipe summary and copies it to the clipboard.
"""

import logging
from typing import Callable, Optional

from partymix.exceptions import ClipboardError
from partymix.models.export import CopyResult
from partymix.models.recipe import Recipe
from partymix.services.amount_formatter import format_ingredient_line
from partymix.services.clipboard import copy_to_clipboard

logger = logging.getLogger(__name__)

INGREDIENTS_HEADER = "재료:"
STEPS_HEADER = "만드는 법:"
MISSION_LABEL = "오늘의 랜덤 미션"
BULLET = "• "

COPY_SUCCESS_MESSAGE = "레시피를 클립보드에 복사했어요!"
COPY_FAILED_MESSAGE = "복사에 실패했습니다. 수동으로 선택해 복사해 주세요."


def build_recipe_text(recipe: Optional[Recipe], mission: str = "") -> str:
    """
    Format a recipe (and the current mission) as a shareable text block.

    The build-step section is left out when the recipe has no steps, and the
    mission line when `mission` is empty. No recipe gives an empty string.
    """
    if recipe is None:
        return ""

    sections = [
        f"{recipe.name} — {recipe.tagline}",
        INGREDIENTS_HEADER + "\n" + "\n".join(
            BULLET + format_ingredient_line(i) for i in recipe.ingredients
        ),
    ]

    if recipe.has_steps:
        sections.append(STEPS_HEADER + "\n" + "\n".join(BULLET + s for s in recipe.howto))

    if mission:
        sections.append(f"{MISSION_LABEL}: {mission}")

    return "\n\n".join(sections)


def export_recipe(
    recipe: Optional[Recipe],
    mission: str = "",
    copier: Callable[[str], None] = copy_to_clipboard,
) -> CopyResult:
    """
    Copy the recipe summary to the clipboard.

    Clipboard failures are reported in the result, never raised.
    """
    text = build_recipe_text(recipe, mission)

    try:
        copier(text)
    except ClipboardError as e:
        logger.warning(f"Recipe copy failed: {e.message}")
        return CopyResult(
            success=False,
            text=text,
            message=COPY_FAILED_MESSAGE,
            error=e.message,
        )

    return CopyResult(success=True, text=text, message=COPY_SUCCESS_MESSAGE)
