"""Unit tests for pagereader.fetcher."""

from __future__ import annotations

import httpx

from pagereader.fetcher import build_http_client, describe_http_error


class TestBuildHttpClient:
    async def test_client_configuration(self) -> None:
        client = build_http_client("TestAgent/1.0")
        try:
            assert isinstance(client, httpx.AsyncClient)
            assert client.follow_redirects is True
            assert client.headers["user-agent"] == "TestAgent/1.0"
        finally:
            await client.aclose()


class TestDescribeHttpError:
    def test_timeout(self) -> None:
        assert describe_http_error(httpx.ReadTimeout("slow")) == "timeout"

    def test_status(self) -> None:
        request = httpx.Request("GET", "https://example.com/")
        response = httpx.Response(503, request=request)
        exc = httpx.HTTPStatusError("unavailable", request=request, response=response)
        assert describe_http_error(exc) == "http_503"

    def test_transport_error(self) -> None:
        assert describe_http_error(httpx.ConnectError("refused")) == "ConnectError: refused"
