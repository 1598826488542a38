"""Shared headless browser handle.

A single Chromium instance is launched on first use and reused across
requests for as long as it stays connected. If it drops, the next
``acquire()`` launches a replacement. Launching happens under a lock so
concurrent cold starts never spawn duplicate browser processes.
"""

from __future__ import annotations

import asyncio

import structlog
from playwright.async_api import Browser, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

log = structlog.get_logger()

LAUNCH_ARGS = [
    "--disable-blink-features=AutomationControlled",
    "--disable-dev-shm-usage",
    "--no-first-run",
]


class BrowserManager:
    def __init__(self, headless: bool = True) -> None:
        self._headless = headless
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._lock = asyncio.Lock()

    async def acquire(self) -> Browser:
        """Return a connected browser, launching one if needed."""
        async with self._lock:
            if self._browser is not None:
                if self._browser.is_connected():
                    return self._browser
                log.warning("browser_disconnected")
                self._browser = None
            self._browser = await self._launch()
            return self._browser

    async def _launch(self) -> Browser:
        if self._playwright is None:
            self._playwright = await async_playwright().start()
        browser = await self._playwright.chromium.launch(headless=self._headless, args=LAUNCH_ARGS)
        log.info("browser_launched", headless=self._headless)
        return browser

    async def shutdown(self) -> None:
        """Close the browser and stop Playwright. Safe to call more than once."""
        async with self._lock:
            if self._browser is not None:
                try:
                    await self._browser.close()
                except PlaywrightError:
                    log.warning("browser_close_error", exc_info=True)
                self._browser = None
            if self._playwright is not None:
                await self._playwright.stop()
                self._playwright = None
