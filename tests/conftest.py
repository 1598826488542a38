"""Shared fixtures for orchestrator and tool tests."""

from __future__ import annotations

import pytest

from pagereader.models.tools import StrategyName
from pagereader.strategies.base import StrategyFailure, StrategyOutcome, StrategySuccess
from pagereader.urls import UrlKind


class FakeStrategy:
    """Strategy stub that records every call and returns a fixed outcome.

    With ``raises`` set, ``attempt`` raises it instead, like a buggy provider.
    """

    def __init__(
        self,
        name: StrategyName,
        content: str | None = None,
        kinds: frozenset[UrlKind] = frozenset(UrlKind),
        raises: Exception | None = None,
    ) -> None:
        self.name = name
        self._content = content
        self._raises = raises
        self._kinds = kinds
        self.calls: list[str] = []

    def applies_to(self, kind: UrlKind) -> bool:
        return kind in self._kinds

    async def attempt(self, url: str) -> StrategyOutcome:
        self.calls.append(url)
        if self._raises is not None:
            raise self._raises
        if self._content is None:
            return StrategyFailure("stubbed failure")
        return StrategySuccess(self._content)


@pytest.fixture()
def fake_strategy() -> type[FakeStrategy]:
    return FakeStrategy
