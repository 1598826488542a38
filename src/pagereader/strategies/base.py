"""Common interface for retrieval strategies.

A strategy never raises for transient problems. Network errors, timeouts,
non-2xx responses and rejected content all come back as ``StrategyFailure``
so the orchestrator can move on to the next strategy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pagereader.models.tools import StrategyName
    from pagereader.urls import UrlKind


@dataclass(frozen=True)
class StrategySuccess:
    content: str


@dataclass(frozen=True)
class StrategyFailure:
    reason: str


StrategyOutcome = StrategySuccess | StrategyFailure


class Strategy(Protocol):
    name: StrategyName

    def applies_to(self, kind: UrlKind) -> bool: ...

    async def attempt(self, url: str) -> StrategyOutcome: ...
