"""Error taxonomy surfaced at the tool boundary.

Only two kinds of failure ever reach an agent: malformed requests and total
retrieval exhaustion. Per-strategy problems (timeouts, bad status codes,
junk content) are expressed as ``StrategyFailure`` values and never raised.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    RETRIEVAL_EXHAUSTED = "RETRIEVAL_EXHAUSTED"


class PageReaderError(Exception):
    """Structured error returned to the agent as a JSON tool result."""

    def __init__(self, code: ErrorCode, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "recoverable": self.recoverable,
            }
        }
