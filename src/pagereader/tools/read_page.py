"""Handler for the ``read_web_page`` tool."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from pagereader.errors import ErrorCode, PageReaderError
from pagereader.models.tools import ReadPageInput

if TYPE_CHECKING:
    from pagereader.models.tools import ReadPageResult
    from pagereader.state import AppState

log = structlog.get_logger()

TOOL_NAME = "read_web_page"

TOOL_DESCRIPTION = (
    "Read and extract content from a web page. Handles JavaScript rendering, "
    "bot-protected pages and X/Twitter posts, and returns content as Markdown."
)

INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "url": {
            "type": "string",
            "description": "The URL of the web page to read",
        },
        "objective": {
            "type": "string",
            "description": (
                "Optional: keywords describing the information you're looking for. "
                "Returns only the lines that mention them."
            ),
        },
        "forceRefetch": {
            "type": "boolean",
            "description": "Force a live fetch instead of using cache (default: false)",
            "default": False,
        },
    },
    "required": ["url"],
}


def _first_error_message(exc: ValidationError) -> str:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "input"
    return f"{field}: {error['msg'].removeprefix('Value error, ')}"


async def handle(arguments: dict[str, Any] | None, state: AppState) -> ReadPageResult:
    """Validate tool arguments and run the fallback chain."""
    try:
        request = ReadPageInput.model_validate(arguments or {})
    except ValidationError as exc:
        raise PageReaderError(
            code=ErrorCode.INVALID_INPUT,
            message=_first_error_message(exc),
            recoverable=False,
        ) from exc

    log.info(
        "read_page_request",
        url=request.url,
        objective=request.objective,
        force_refetch=request.force_refetch,
    )
    return await state.reader.read_page(
        request.url,
        objective=request.objective,
        force_refetch=request.force_refetch,
    )
