"""Detector and server settings loaded from environment variables."""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import MatchMode


class Settings(BaseSettings):
    """Runtime knobs for the detector and its entry points."""

    match_mode: MatchMode = Field(MatchMode.WORD, alias="ALLERGEN_MATCH_MODE")
    resolve_aliases: bool = Field(True, alias="ALLERGEN_RESOLVE_ALIASES")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    allowed_origins: str = Field("*", alias="ALLOWED_ORIGINS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def allowed_origins_list(self) -> List[str]:
        """Return ALLOWED_ORIGINS as a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
