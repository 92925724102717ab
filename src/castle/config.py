# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Runtime settings, read from ``CASTLE_*`` environment variables or a .env file."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LEVEL_PATH = Path(__file__).parent / "data" / "castle.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CASTLE_", env_file=".env", extra="ignore")

    level_path: Path = DEFAULT_LEVEL_PATH
    log_level: str = "WARNING"
    seed: int | None = None

