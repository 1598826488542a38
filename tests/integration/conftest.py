"""Integration test fixtures.

Provides a fully wired AppState (real strategies over a respx-mocked HTTP
client, no browser launch) and an environment for server subprocesses.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import httpx
import pytest

from pagereader.browser import BrowserManager
from pagereader.cache import Cache
from pagereader.config import Settings
from pagereader.reader import PageReader
from pagereader.state import AppState
from pagereader.strategies import build_strategies

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@pytest.fixture()
def subprocess_env(tmp_path) -> dict[str, str]:
    """Environment for ``python -m pagereader.server`` isolated from user config."""
    env = os.environ.copy()
    for key in list(env):
        if key.startswith("PAGEREADER__"):
            del env[key]
    env["PAGEREADER__LOGGING__FORMAT"] = "json"
    env["HOME"] = str(tmp_path)
    env["XDG_CONFIG_HOME"] = str(tmp_path / ".config")
    return env


@pytest.fixture()
async def app_state() -> AsyncIterator[AppState]:
    """Full AppState wired with the default strategy chain."""
    settings = Settings(reader={"api_key": None})
    async with httpx.AsyncClient(follow_redirects=True) as client:
        browser = BrowserManager()
        cache = Cache(ttl_hours=settings.cache.ttl_hours)
        reader = PageReader(cache, build_strategies(settings, client, browser))
        yield AppState(
            settings=settings,
            reader=reader,
            cache=cache,
            http_client=client,
            browser=browser,
        )
        await browser.shutdown()
