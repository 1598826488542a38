from __future__ import annotations

from pagereader.models.cache import PageCacheEntry
from pagereader.models.tools import ReadPageInput, ReadPageResult, StrategyName

__all__ = [
    # cache
    "PageCacheEntry",
    # tools
    "ReadPageInput",
    "ReadPageResult",
    "StrategyName",
]
