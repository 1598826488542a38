"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (PAGEREADER__READER__TIMEOUT_SECONDS=60)
  2. pagereader.yaml        (searched in cwd, then the platform config dir)
  3. Hardcoded defaults

The config file is optional — all fields have sensible defaults.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_DEFAULT_CONFIG_DIR = platformdirs.user_config_dir("pagereader")

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def _find_config_file() -> str | None:
    """Return the path of the first pagereader.yaml found, or None."""
    candidates = [
        Path("pagereader.yaml"),
        Path(_DEFAULT_CONFIG_DIR) / "pagereader.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class CacheSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    ttl_hours: int = 24


class FetcherSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    direct_timeout_seconds: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT


class SocialSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    api_base_url: str = "https://api.fxtwitter.com"
    timeout_seconds: float = 10.0


class ReaderSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_url: str = "https://r.jina.ai"
    timeout_seconds: float = 30.0
    # Optional; raises the reader service's rate limit when present.
    api_key: str | None = Field(default_factory=lambda: os.environ.get("JINA_API_KEY") or None)


class BrowserSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    headless: bool = True
    navigation_timeout_seconds: float = 45.0
    settle_seconds: float = 3.0


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: PAGEREADER__CACHE__TTL_HOURS=12
        env_prefix="PAGEREADER__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    cache: CacheSettings = CacheSettings()
    fetcher: FetcherSettings = FetcherSettings()
    social: SocialSettings = SocialSettings()
    # Built per instance so JINA_API_KEY is read when settings load, not at import.
    reader: ReaderSettings = Field(default_factory=ReaderSettings)
    browser: BrowserSettings = BrowserSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
