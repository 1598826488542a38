"""Shared resources created once in the server lifespan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from pagereader.browser import BrowserManager
    from pagereader.cache import Cache
    from pagereader.config import Settings
    from pagereader.reader import PageReader


@dataclass
class AppState:
    settings: Settings
    reader: PageReader
    cache: Cache | None = None
    http_client: httpx.AsyncClient | None = None
    browser: BrowserManager | None = None
