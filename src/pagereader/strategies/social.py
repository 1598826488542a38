from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from pagereader.fetcher import describe_http_error
from pagereader.models.tools import StrategyName
from pagereader.strategies.base import StrategyFailure, StrategyOutcome, StrategySuccess
from pagereader.urls import UrlKind, parse_social_post

if TYPE_CHECKING:
    from pagereader.urls import SocialPost

MIN_POST_TEXT_LENGTH = 10


def _count(value: Any) -> str:
    return f"{value:,}" if isinstance(value, int) and not isinstance(value, bool) else "n/a"


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def format_post(post: dict[str, Any], fallback_url: str) -> str:
    """Render an FxTwitter ``tweet`` object as Markdown."""
    author = _as_dict(post.get("author"))
    name = author.get("name") or "Unknown"
    handle = author.get("screen_name") or "unknown"

    lines = [f"# Post by {name} (@{handle})", "", post["text"].strip(), ""]

    media = _as_dict(post.get("media")).get("all")
    if not isinstance(media, list):
        media = []
    rendered = 0
    for item in media:
        media_url = _as_dict(item).get("url")
        if not isinstance(media_url, str) or not media_url:
            continue
        rendered += 1
        if item.get("type") == "photo":
            lines.append(f"![image]({media_url})")
        else:
            lines.append(f"[{item.get('type', 'media')}]({media_url})")
    if rendered:
        lines.append("")

    lines.append(
        f"**Likes:** {_count(post.get('likes'))} | "
        f"**Reposts:** {_count(post.get('retweets'))} | "
        f"**Replies:** {_count(post.get('replies'))} | "
        f"**Views:** {_count(post.get('views'))}"
    )
    if post.get("created_at"):
        lines.append(f"**Posted:** {post['created_at']}")
    source = post.get("url")
    lines.append(f"**Source:** {source if isinstance(source, str) and source else fallback_url}")
    return "\n".join(lines)


class SocialApiStrategy:
    """Reads X/Twitter posts through the FxTwitter JSON API."""

    name = StrategyName.SOCIAL_API

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_base_url: str = "https://api.fxtwitter.com",
        timeout: float = 10.0,
    ) -> None:
        self._client = client
        self._api_base_url = api_base_url.rstrip("/")
        self._timeout = timeout

    def applies_to(self, kind: UrlKind) -> bool:
        return kind is UrlKind.SOCIAL_POST

    async def _fetch_post(self, post: SocialPost) -> dict[str, Any] | StrategyFailure:
        try:
            response = await self._client.get(
                f"{self._api_base_url}/{post.api_path}", timeout=self._timeout
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            return StrategyFailure(describe_http_error(exc))
        except ValueError:
            return StrategyFailure("invalid JSON from social API")

        tweet = payload.get("tweet") if isinstance(payload, dict) else None
        if not isinstance(tweet, dict):
            return StrategyFailure("social API response has no post")
        return tweet

    async def attempt(self, url: str) -> StrategyOutcome:
        post = parse_social_post(url)
        if post is None:
            return StrategyFailure("not a parseable post URL")

        tweet = await self._fetch_post(post)
        if isinstance(tweet, StrategyFailure):
            return tweet

        text = tweet.get("text")
        if not isinstance(text, str) or len(text.strip()) < MIN_POST_TEXT_LENGTH:
            return StrategyFailure("post text missing or too short")
        return StrategySuccess(format_post(tweet, url))
