from __future__ import annotations

from typing import TYPE_CHECKING

from pagereader.strategies.base import (
    Strategy,
    StrategyFailure,
    StrategyOutcome,
    StrategySuccess,
)
from pagereader.strategies.browser import BrowserStrategy
from pagereader.strategies.direct import DirectFetchStrategy
from pagereader.strategies.reader_api import ReaderApiStrategy
from pagereader.strategies.social import SocialApiStrategy

if TYPE_CHECKING:
    import httpx

    from pagereader.browser import BrowserManager
    from pagereader.config import Settings

__all__ = [
    "Strategy",
    "StrategyFailure",
    "StrategyOutcome",
    "StrategySuccess",
    "BrowserStrategy",
    "DirectFetchStrategy",
    "ReaderApiStrategy",
    "SocialApiStrategy",
    "build_strategies",
]


def build_strategies(
    settings: Settings, client: httpx.AsyncClient, browser: BrowserManager
) -> list[Strategy]:
    """Default chain, cheapest first. Append new providers before the browser."""
    return [
        DirectFetchStrategy(client, timeout=settings.fetcher.direct_timeout_seconds),
        SocialApiStrategy(
            client,
            api_base_url=settings.social.api_base_url,
            timeout=settings.social.timeout_seconds,
        ),
        ReaderApiStrategy(
            client,
            base_url=settings.reader.base_url,
            api_key=settings.reader.api_key,
            timeout=settings.reader.timeout_seconds,
        ),
        BrowserStrategy(
            browser,
            navigation_timeout=settings.browser.navigation_timeout_seconds,
            settle_seconds=settings.browser.settle_seconds,
            user_agent=settings.fetcher.user_agent,
        ),
    ]
