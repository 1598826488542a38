"""MCP stdio server exposing the ``read_web_page`` tool.

Run with ``python -m pagereader.server`` or the ``pagereader`` script.
Configuration is validated before the transport starts, so a bad setting
exits non-zero without reading any protocol input.
"""

from __future__ import annotations

import asyncio
import json
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import mcp.types as types
import structlog
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from pagereader import __version__
from pagereader.browser import BrowserManager
from pagereader.cache import Cache
from pagereader.config import Settings
from pagereader.errors import ErrorCode, PageReaderError
from pagereader.fetcher import build_http_client
from pagereader.logging_config import configure_logging
from pagereader.reader import PageReader
from pagereader.state import AppState
from pagereader.strategies import build_strategies
from pagereader.tools import read_page

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

log = structlog.get_logger()


def _error_result(exc: PageReaderError) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=json.dumps(exc.to_dict()))],
        isError=True,
    )


def build_server(settings: Settings) -> Server:
    @asynccontextmanager
    async def lifespan(_server: Server) -> AsyncIterator[AppState]:
        http_client = build_http_client(settings.fetcher.user_agent)
        browser = BrowserManager(headless=settings.browser.headless)
        cache = Cache(ttl_hours=settings.cache.ttl_hours)
        reader = PageReader(cache, build_strategies(settings, http_client, browser))
        log.info("server_started", version=__version__)
        try:
            yield AppState(
                settings=settings,
                reader=reader,
                cache=cache,
                http_client=http_client,
                browser=browser,
            )
        finally:
            await browser.shutdown()
            await http_client.aclose()
            log.info("server_stopped")

    server: Server = Server("pagereader", version=__version__, lifespan=lifespan)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=read_page.TOOL_NAME,
                description=read_page.TOOL_DESCRIPTION,
                inputSchema=read_page.INPUT_SCHEMA,
            )
        ]

    # Arguments are validated by the tool handler so failures keep the JSON error shape.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        state: AppState = server.request_context.lifespan_context
        try:
            if name != read_page.TOOL_NAME:
                raise PageReaderError(
                    code=ErrorCode.UNKNOWN_TOOL,
                    message=f"Unknown tool: {name}",
                    recoverable=False,
                )
            result = await read_page.handle(arguments, state)
        except PageReaderError as exc:
            log.warning("tool_error", tool=name, code=exc.code, message=exc.message)
            return _error_result(exc)

        return types.CallToolResult(
            content=[types.TextContent(type="text", text=result.content)],
            isError=False,
        )

    return server


async def _run_stdio(settings: Settings) -> None:
    server = build_server(settings)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    settings = Settings()
    configure_logging(settings.logging)
    asyncio.run(_run_stdio(settings))


if __name__ == "__main__":
    main()
