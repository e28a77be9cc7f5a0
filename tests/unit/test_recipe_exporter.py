"""Tests for the recipe text exporter."""

from partymix.exceptions import ClipboardError
from partymix.services.recipe_exporter import (
    COPY_FAILED_MESSAGE,
    COPY_SUCCESS_MESSAGE,
    build_recipe_text,
    export_recipe,
)


class TestBuildRecipeText:
    """Text layout."""

    def test_full_layout(self, sample_recipes):
        text = build_recipe_text(sample_recipes[0], "건배사 담당하기")

        assert text == (
            "모히또 — 민트 향 터지는 섬 한 잔!\n"
            "\n"
            "재료:\n"
            "• 럼: 45ml\n"
            "• 라임: .5개 (즙 + 조각)\n"
            "• 토닉: 90-120ml\n"
            "\n"
            "만드는 법:\n"
            "• 얼음 가득 → 럼 → 토닉\n"
            "• 가볍게 스터\n"
            "\n"
            "오늘의 랜덤 미션: 건배사 담당하기"
        )

    def test_no_steps_omits_section(self, sample_recipes):
        text = build_recipe_text(sample_recipes[1], "건배사 담당하기")

        assert "만드는 법" not in text
        assert text.endswith("• 우유: 90ml\n\n오늘의 랜덤 미션: 건배사 담당하기")

    def test_empty_mission_omits_line(self, sample_recipes):
        text = build_recipe_text(sample_recipes[1], "")

        assert "오늘의 랜덤 미션" not in text
        assert text.endswith("• 우유: 90ml")

    def test_no_recipe_is_empty(self):
        assert build_recipe_text(None, "건배사 담당하기") == ""


class TestExportRecipe:
    """Clipboard outcome reporting."""

    def test_success(self, sample_recipes):
        copied = []

        result = export_recipe(sample_recipes[0], "칭찬 한 마디", copier=copied.append)

        assert result.success is True
        assert result.message == COPY_SUCCESS_MESSAGE
        assert copied == [result.text]
        assert result.error is None

    def test_failure_is_caught(self, sample_recipes):
        def broken_copier(text):
            raise ClipboardError("no clipboard")

        result = export_recipe(sample_recipes[0], "칭찬 한 마디", copier=broken_copier)

        assert result.success is False
        assert result.message == COPY_FAILED_MESSAGE
        assert result.error == "no clipboard"
        # Text is still returned for manual copy
        assert result.text.startswith("모히또")

    def test_no_recipe_still_copies_empty_text(self):
        copied = []

        result = export_recipe(None, "", copier=copied.append)

        assert result.success is True
        assert copied == [""]
