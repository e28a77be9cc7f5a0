"""Pytest configuration and fixtures."""

import os
import random

import pytest

# Set test environment before importing the app
os.environ["UI_MISSION_PACK"] = "classic"
os.environ["UI_LOG_LEVEL"] = "DEBUG"

from partymix.models.mission import MissionPool
from partymix.models.recipe import Ingredient, Recipe


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def sample_recipes() -> list:
    """A small catalog: one recipe with steps, one without."""
    return [
        Recipe(
            id="mojito",
            name="모히또",
            tagline="민트 향 터지는 섬 한 잔!",
            color="#10b981",
            ingredients=(
                Ingredient(name="럼", amount=45, unit="ml"),
                Ingredient(name="라임", amount=0.5, unit="piece", note="즙 + 조각"),
                Ingredient(name="토닉", amount=105, unit="ml", range=(90, 120)),
            ),
            howto=("얼음 가득 → 럼 → 토닉", "가볍게 스터"),
        ),
        Recipe(
            id="peach_milk",
            name="피치밀크",
            tagline="달콤 크리미 디저트 잔",
            color="#fb7185",
            ingredients=(
                Ingredient(name="피치트리", amount=30, unit="ml"),
                Ingredient(name="우유", amount=90, unit="ml"),
            ),
        ),
    ]


@pytest.fixture
def sample_pool() -> MissionPool:
    """Generic pool of three plus two mojito-only missions."""
    return MissionPool(
        name="test",
        common=("건배사 담당하기", "왼손만 사용하기", "칭찬 한 마디"),
        by_recipe={"mojito": ("민트 하트 만들기", "라임 아트 만들기")},
    )
