from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from pagereader.fetcher import describe_http_error
from pagereader.models.tools import StrategyName
from pagereader.strategies.base import StrategyFailure, StrategyOutcome, StrategySuccess
from pagereader.validator import is_valid_content

if TYPE_CHECKING:
    from pagereader.urls import UrlKind


class ReaderApiStrategy:
    """Delegates rendering and extraction to the Jina Reader service.

    The service returns Markdown directly. An API key is optional and only
    raises the rate limit.
    """

    name = StrategyName.READER_API

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = "https://r.jina.ai",
        api_key: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout

    def applies_to(self, kind: UrlKind) -> bool:
        return True

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "text/plain", "X-Return-Format": "markdown"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def attempt(self, url: str) -> StrategyOutcome:
        try:
            response = await self._client.get(
                f"{self._base_url}/{url}", headers=self._headers(), timeout=self._timeout
            )
            response.raise_for_status()
        except httpx.InvalidURL as exc:
            return StrategyFailure(f"invalid URL: {exc}")
        except httpx.HTTPError as exc:
            return StrategyFailure(describe_http_error(exc))

        content = response.text.strip()
        if not is_valid_content(content):
            return StrategyFailure(f"rejected by validator ({len(content)} chars)")
        return StrategySuccess(content)
