"""UI Configuration."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

from partymix.catalog import list_mission_packs


class UISettings(BaseSettings):
    """UI settings loaded from environment variables."""

    # UI settings
    page_title: str = "칵테일 파티 – 랜덤 미션 & 레시피"
    page_icon: str = "🍸"
    show_footer: bool = True

    # Which mission pack to draw from (classic, team_night)
    mission_pack: str = "classic"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "UI_"

    @field_validator("mission_pack")
    @classmethod
    def check_mission_pack(cls, v: str) -> str:
        if v not in list_mission_packs():
            raise ValueError(f"unknown mission pack '{v}', expected one of {list_mission_packs()}")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache()
def get_settings() -> UISettings:
    """Get cached settings instance."""
    return UISettings()
