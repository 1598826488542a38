from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import structlog

from pagereader.converter import html_to_markdown
from pagereader.fetcher import BROWSER_HEADERS, describe_http_error
from pagereader.models.tools import StrategyName
from pagereader.strategies.base import StrategyFailure, StrategyOutcome, StrategySuccess
from pagereader.validator import is_valid_content

if TYPE_CHECKING:
    from pagereader.urls import UrlKind

log = structlog.get_logger()

# Bodies with these content types are already readable text.
_TEXT_TYPES = ("text/plain", "text/markdown", "text/x-markdown")


class DirectFetchStrategy:
    """Plain HTTP GET with browser-like headers."""

    name = StrategyName.DIRECT

    def __init__(self, client: httpx.AsyncClient, timeout: float = 10.0) -> None:
        self._client = client
        self._timeout = timeout

    def applies_to(self, kind: UrlKind) -> bool:
        return True

    async def attempt(self, url: str) -> StrategyOutcome:
        try:
            response = await self._client.get(url, headers=BROWSER_HEADERS, timeout=self._timeout)
            response.raise_for_status()
        except httpx.InvalidURL as exc:
            return StrategyFailure(f"invalid URL: {exc}")
        except httpx.HTTPError as exc:
            return StrategyFailure(describe_http_error(exc))

        content_type = response.headers.get("content-type", "").lower()
        if content_type.startswith(_TEXT_TYPES):
            content = response.text.strip()
        else:
            content = html_to_markdown(response.text)

        if not is_valid_content(content):
            return StrategyFailure(f"rejected by validator ({len(content)} chars)")
        log.debug("direct_fetch_ok", url=str(response.url), length=len(content))
        return StrategySuccess(content)
