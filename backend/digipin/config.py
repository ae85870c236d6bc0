"""
DigiPIN — Configuration via pydantic-settings.

Environment variables (``DIGIPIN_*``) override defaults.  The region and
symbol grid live in ``digipin.spatial.grid`` as constants; only the
service surface and map framing are configured here.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import ClassVar

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env_path: ClassVar[str] = str(Path(__file__).resolve().parents[2] / ".env")
    model_config = SettingsConfigDict(
        env_file=env_path,
        env_file_encoding="utf-8",
        env_prefix="DIGIPIN_",
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────
    app_name: str = "DigiPIN"
    debug: bool = False
    log_level: str = "INFO"

    # Checked at startup: must decode and re-encode to itself.
    reference_code: str = "4P3-JM8-K4L6"

    # ── Map framing (consumed by map clients) ─────────────────────
    map_default_zoom: int = 5
    map_min_zoom: int = 4
    map_max_zoom: int = 19
    # Zoom used when jumping to a located code or point.
    locate_zoom: int = 18

    # Prefix for share links, e.g. "https://digipin.example/".  Empty
    # means relative links ("?pin=...").
    share_base_url: str = ""

    # ── CORS ───────────────────────────────────────────────────────
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse the comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
