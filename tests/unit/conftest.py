"""Unit-specific fixtures (no I/O beyond mocked HTTP)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from pagereader.cache import Cache

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@pytest.fixture()
def cache() -> Cache:
    """Fresh in-memory cache for unit tests."""
    return Cache(ttl_hours=24)


@pytest.fixture()
async def client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(follow_redirects=True) as c:
        yield c


@pytest.fixture()
def article_text() -> str:
    """Plain prose comfortably above the validator's length threshold."""
    return (
        "The quarterly report shows steady growth across every region. "
        "Revenue increased by twelve percent compared with last year, "
        "driven mostly by new subscriptions and lower churn. "
        "Operating costs stayed flat while the team expanded support hours."
    )
