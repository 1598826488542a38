"""Shared HTTP client for the network-bound strategies.

One ``httpx.AsyncClient`` is created at startup and shared by every strategy.
Each strategy passes its own ``timeout=`` per request.
"""

from __future__ import annotations

import httpx

from pagereader.config import DEFAULT_USER_AGENT

BROWSER_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Upgrade-Insecure-Requests": "1",
}


def build_http_client(user_agent: str = DEFAULT_USER_AGENT) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        follow_redirects=True,
        timeout=httpx.Timeout(10.0),
        headers={"User-Agent": user_agent},
        limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
    )


def describe_http_error(exc: httpx.HTTPError) -> str:
    """Short, loggable reason for a failed request."""
    if isinstance(exc, httpx.TimeoutException):
        return "timeout"
    if isinstance(exc, httpx.HTTPStatusError):
        return f"http_{exc.response.status_code}"
    return f"{type(exc).__name__}: {exc}"
