"""Heuristic check that retrieved text is a real page, not a stub.

Cheap strategies often succeed at the transport level while returning a
JS-only shell, a bot challenge or an error page. Anything shorter than
``MIN_CONTENT_LENGTH`` or containing a known junk phrase is rejected.
"""

from __future__ import annotations

MIN_CONTENT_LENGTH = 200

JUNK_PHRASES: tuple[str, ...] = (
    "something went wrong",
    "enable javascript",
    "checking your browser",
    "access denied",
    "just a moment",
    "please enable cookies",
    "verify you are human",
    "javascript is disabled",
    "sign in to continue",
)


def is_valid_content(text: str) -> bool:
    if len(text) < MIN_CONTENT_LENGTH:
        return False
    lower = text.lower()
    return not any(phrase in lower for phrase in JUNK_PHRASES)
