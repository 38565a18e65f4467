"""
Post sources that publish JSON instead of RSS/Atom XML.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import httpx
import structlog

from .exceptions import ParseError, RSSFetchError
from .models import FeedItem
from .normalizer import to_feed_item

logger = structlog.get_logger()

_LINK_KEYS = ("link", "url")
_DATE_KEYS = ("pubDate", "date", "published_at", "published")


def _first_str(entry: Dict[str, Any], keys: Iterable[str]) -> str:
    for key in keys:
        val = entry.get(key)
        if isinstance(val, str) and val.strip():
            return val.strip()
    return ""


class JsonPostSource:
    """
    A blog whose posts are served as a JSON array.

    The payload is either a bare list of post objects or an object with a
    `posts` list. Each post needs a `link` (or `url`); `title` and a date
    (`pubDate`, `date`, `published_at` or `published`) are optional.
    """

    def __init__(
        self,
        url: str,
        *,
        source: Optional[str] = None,
        source_url: Optional[str] = None,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.url = url
        self.source = source
        self.source_url = source_url
        self._timeout = timeout
        self._client = client

    def _get(self) -> httpx.Response:
        if self._client is not None:
            return self._client.get(self.url)
        with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
            return client.get(self.url)

    def fetch_raw(self) -> Any:
        """
        Fetch and decode the JSON payload.

        Raises:
            RSSFetchError: When the request fails or returns an error status.
            ParseError: When the body is not JSON.
        """
        try:
            response = self._get()
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise RSSFetchError(f"Request timed out: {self.url} ({e})") from e
        except httpx.HTTPStatusError as e:
            raise RSSFetchError(
                f"HTTP {e.response.status_code} from {self.url}"
            ) from e
        except httpx.RequestError as e:
            raise RSSFetchError(f"Request failed: {self.url} ({e})") from e

        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Response is not JSON: {self.url}") from e

    def fetch(self) -> List[FeedItem]:
        payload = self.fetch_raw()
        if isinstance(payload, dict):
            payload = payload.get("posts")
        if not isinstance(payload, list):
            raise ParseError(f"Expected a list of posts: {self.url}")

        items: List[FeedItem] = []
        for post in payload:
            if not isinstance(post, dict):
                continue
            entry = {
                "title": _first_str(post, ("title",)),
                "link": _first_str(post, _LINK_KEYS),
                "pub_date": _first_str(post, _DATE_KEYS),
            }
            try:
                items.append(
                    to_feed_item(
                        entry,
                        source_feed_url=self.url,
                        source=self.source,
                        source_url=self.source_url,
                    )
                )
            except ValueError:
                # Skip posts without a link
                continue
        return items


def fetch_posts(sources: Iterable[JsonPostSource]) -> List[FeedItem]:
    """
    Fetch every source; a failing source contributes nothing and is logged.
    """
    all_items: List[FeedItem] = []
    for src in sources:
        try:
            all_items.extend(src.fetch())
        except (RSSFetchError, ParseError) as e:
            logger.warning("post_source_failed", source=src.url, error=str(e))
            continue
    return all_items
