from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict  # type: ignore[import-not-found]


def yaml_config_settings_source(_: type[BaseSettings]):
    def _source() -> dict:
        path = Path(os.getenv("ASCIICAM_CONFIG_FILE", "config.yaml"))
        if not path.exists():
            return {}
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return data
    return _source


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ASCIICAM_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origin_regex: str | None = None
    log_level: str = "INFO"

    # Capture
    camera_index: int = 0
    mirror: bool = True
    # Used until the page reports window.screen
    screen_width: int = Field(default=1920, gt=0)
    screen_height: int = Field(default=1080, gt=0)

    # Rendering
    fps: float = Field(default=30.0, gt=0)
    preview_quality: int = Field(default=70, ge=1, le=100)

    @classmethod
    def settings_customise_sources(cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings):
        # Order = highest priority first. Env should override YAML.
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
            yaml_config_settings_source(cls),
        )


settings = AppSettings()
