from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StrategyName(StrEnum):
    DIRECT = "direct"
    SOCIAL_API = "social_api"
    READER_API = "reader_api"
    BROWSER = "browser"
    CACHE = "cache"


class ReadPageInput(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    objective: str | None = None
    force_refetch: bool = Field(default=False, alias="forceRefetch")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        # Kept verbatim: the cache is keyed on the exact string the caller sent.
        if not v.strip():
            raise ValueError("url must not be empty")
        if v != v.strip():
            raise ValueError("url must not have leading or trailing whitespace")
        if len(v) > 2048:
            raise ValueError("url must not exceed 2048 characters")
        if not v.startswith(("http://", "https://")):
            raise ValueError("url must use http or https scheme")
        return v

    @field_validator("objective")
    @classmethod
    def validate_objective(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        if len(v) > 500:
            raise ValueError("objective must not exceed 500 characters")
        return v or None


class ReadPageResult(BaseModel):
    url: str
    content: str  # Markdown, objective filter already applied
    strategy: StrategyName
    cached: bool
    cached_at: datetime | None = None
