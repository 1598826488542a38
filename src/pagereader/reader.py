"""Fallback orchestrator.

``PageReader.read_page`` checks the cache, then runs the strategies that
apply to the URL strictly in order, stopping at the first success. The
winning content is cached under the caller's URL string, then filtered by
the objective if one was given. Only exhaustion of the whole chain is an
error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from pagereader.errors import ErrorCode, PageReaderError
from pagereader.filtering import filter_by_objective
from pagereader.models.tools import ReadPageResult, StrategyName
from pagereader.strategies.base import StrategyFailure, StrategySuccess
from pagereader.urls import classify_url

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from pagereader.cache import Cache
    from pagereader.strategies.base import Strategy

log = structlog.get_logger()


class PageReader:
    def __init__(self, cache: Cache, strategies: Sequence[Strategy]) -> None:
        self._cache = cache
        self._strategies = list(strategies)

    def plan(self, url: str) -> list[Strategy]:
        """Strategies to try for ``url``, in order."""
        kind = classify_url(url)
        return [strategy for strategy in self._strategies if strategy.applies_to(kind)]

    async def _retrieve(self, url: str) -> tuple[str, StrategyName]:
        plan = self.plan(url)
        for strategy in plan:
            log.debug("strategy_attempt", url=url, strategy=strategy.name)
            try:
                outcome = await strategy.attempt(url)
            except Exception as exc:
                # A broken provider must not abort the chain.
                log.warning("strategy_error", url=url, strategy=strategy.name, exc_info=True)
                outcome = StrategyFailure(f"unexpected error: {type(exc).__name__}")
            match outcome:
                case StrategySuccess(content=content):
                    log.info(
                        "strategy_succeeded", url=url, strategy=strategy.name, length=len(content)
                    )
                    return content, strategy.name
                case StrategyFailure(reason=reason):
                    log.info("strategy_failed", url=url, strategy=strategy.name, reason=reason)

        tried = ", ".join(strategy.name for strategy in plan)
        raise PageReaderError(
            code=ErrorCode.RETRIEVAL_EXHAUSTED,
            message=f"Could not read {url}: all available strategies failed ({tried}).",
            recoverable=True,
        )

    async def read_page(
        self,
        url: str,
        objective: str | None = None,
        force_refetch: bool = False,
    ) -> ReadPageResult:
        content: str
        strategy: StrategyName
        cached_at: datetime | None = None

        entry = None if force_refetch else await self._cache.get_page(url)
        if entry is not None:
            log.info("cache_hit", url=url)
            content, strategy, cached_at = entry.content, StrategyName.CACHE, entry.fetched_at
        else:
            content, strategy = await self._retrieve(url)
            await self._cache.set_page(url, content)

        if objective:
            content = filter_by_objective(content, objective)

        return ReadPageResult(
            url=url,
            content=content,
            strategy=strategy,
            cached=entry is not None,
            cached_at=cached_at,
        )
