"""URL classification.

Classification picks which strategies run for a URL. It never changes the
cache key, which is always the URL string as the caller supplied it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import urlsplit

SOCIAL_HOSTS = frozenset(
    {
        "x.com",
        "www.x.com",
        "mobile.x.com",
        "twitter.com",
        "www.twitter.com",
        "mobile.twitter.com",
    }
)

# /<handle>/status/<numeric id>, optionally followed by /photo/1 etc.
_POST_PATH_RE = re.compile(r"^/([A-Za-z0-9_]{1,15})/status(?:es)?/(\d+)(?:/.*)?$")


class UrlKind(StrEnum):
    SOCIAL_POST = "social_post"
    GENERAL = "general"


@dataclass(frozen=True)
class SocialPost:
    handle: str
    post_id: str

    @property
    def api_path(self) -> str:
        return f"{self.handle}/status/{self.post_id}"


def _host(url: str) -> str:
    return (urlsplit(url).hostname or "").lower()


def classify_url(url: str) -> UrlKind:
    parts = urlsplit(url)
    if _host(url) in SOCIAL_HOSTS and "/status" in parts.path:
        return UrlKind.SOCIAL_POST
    return UrlKind.GENERAL


def parse_social_post(url: str) -> SocialPost | None:
    """Extract the canonical post path, or ``None`` if the URL is not a parseable post."""
    if _host(url) not in SOCIAL_HOSTS:
        return None
    match = _POST_PATH_RE.match(urlsplit(url).path)
    if match is None:
        return None
    return SocialPost(handle=match.group(1), post_id=match.group(2))
