from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class PageCacheEntry(BaseModel):
    """Cached Markdown for a single URL."""

    url: str  # Caller-supplied URL, used verbatim as the key
    content: str  # Full page markdown, before objective filtering
    fetched_at: datetime
    expires_at: datetime
