"""Last-resort strategy: render the page in headless Chromium.

Its output is never run through the validator. There is nothing left to fall
back to, so whatever the page rendered is returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from playwright.async_api import Error as PlaywrightError

from pagereader.config import DEFAULT_USER_AGENT
from pagereader.converter import html_to_markdown
from pagereader.fetcher import BROWSER_HEADERS
from pagereader.models.tools import StrategyName
from pagereader.strategies.base import StrategyFailure, StrategyOutcome, StrategySuccess

if TYPE_CHECKING:
    from playwright.async_api import Page, Route

    from pagereader.browser import BrowserManager
    from pagereader.urls import UrlKind

log = structlog.get_logger()

BLOCKED_DOMAINS = (
    "doubleclick.net",
    "adservice.google.com",
    "googlesyndication.com",
    "facebook.com/tr",
    "analytics.google.com",
    "google-analytics.com",
    "facebook.net",
    "connect.facebook.net",
    "bat.bing.com",
    "clarity.ms",
    "hotjar.com",
    "intercom.io",
    "segment.com",
    "cdn.segment.com",
)

BLOCKED_EXTENSIONS = (
    "png",
    "jpg",
    "jpeg",
    "gif",
    "svg",
    "webp",
    "mp3",
    "mp4",
    "webm",
    "avi",
    "mov",
    "flac",
    "wav",
    "ogg",
)

# Hides the usual automation markers from page scripts.
STEALTH_SCRIPT = """
Object.defineProperty(navigator, 'webdriver', { get: () => false });
Object.defineProperty(navigator, 'plugins', { get: () => [1, 2, 3] });
Object.defineProperty(navigator, 'languages', { get: () => ['en-US', 'en'] });
"""


def is_blocked_request(url: str) -> bool:
    lowered = url.lower()
    if any(domain in lowered for domain in BLOCKED_DOMAINS):
        return True
    path = lowered.split("?", 1)[0].split("#", 1)[0]
    return path.endswith(tuple(f".{ext}" for ext in BLOCKED_EXTENSIONS))


async def _route_request(route: Route) -> None:
    if is_blocked_request(route.request.url):
        await route.abort()
    else:
        await route.continue_()


class BrowserStrategy:
    name = StrategyName.BROWSER

    def __init__(
        self,
        manager: BrowserManager,
        navigation_timeout: float = 45.0,
        settle_seconds: float = 3.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._manager = manager
        self._navigation_timeout_ms = navigation_timeout * 1000
        self._settle_ms = settle_seconds * 1000
        self._user_agent = user_agent

    def applies_to(self, kind: UrlKind) -> bool:
        return True

    async def _navigate(self, page: Page, url: str) -> None:
        try:
            await page.goto(url, wait_until="domcontentloaded", timeout=self._navigation_timeout_ms)
        except PlaywrightError:
            log.info("browser_navigation_retry", url=url, wait_until="load")
            try:
                await page.goto(url, wait_until="load", timeout=self._navigation_timeout_ms)
            except PlaywrightError:
                # Whatever has rendered so far is still worth extracting.
                log.info("browser_navigation_incomplete", url=url)

    async def attempt(self, url: str) -> StrategyOutcome:
        try:
            browser = await self._manager.acquire()
            context = await browser.new_context(
                user_agent=self._user_agent,
                viewport={"width": 1280, "height": 720},
                extra_http_headers=BROWSER_HEADERS,
            )
        except PlaywrightError as exc:
            return StrategyFailure(f"browser unavailable: {exc}")

        try:
            page = await context.new_page()
            await page.route("**/*", _route_request)
            await page.add_init_script(STEALTH_SCRIPT)
            await self._navigate(page, url)
            await page.wait_for_timeout(self._settle_ms)
            html = await page.content()
        except PlaywrightError as exc:
            return StrategyFailure(f"browser render failed: {exc}")
        finally:
            try:
                await context.close()
            except PlaywrightError:
                log.debug("browser_context_close_error", exc_info=True)

        return StrategySuccess(html_to_markdown(html))
