from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import feedparser
import structlog

from .exceptions import RSSFetchError
from .models import FeedItem
from .normalizer import to_feed_item
from .parser import parse_entry

logger = structlog.get_logger()


def fetch_feed(url: str) -> feedparser.FeedParserDict:
    """
    Fetch a single feed URL (or raw XML document) and return the parsed feed.

    Raises RSSFetchError on network/parse issues or when feed is malformed (bozo).
    """
    try:
        feed = feedparser.parse(url)
    except Exception as e:  # pragma: no cover - surface as domain error
        raise RSSFetchError(f"Failed to fetch feed: {url} ({e})") from e

    if getattr(feed, "bozo", 0):
        exc = getattr(feed, "bozo_exception", None)
        msg = f"Invalid RSS/Atom feed: {url}"
        if exc:
            msg += f" ({exc})"
        raise RSSFetchError(msg)

    entries = getattr(feed, "entries", None)
    if not isinstance(entries, list):
        raise RSSFetchError(f"Feed has no entries: {url}")
    return feed


def _feed_meta(feed: feedparser.FeedParserDict, key: str) -> Optional[str]:
    meta: Dict[str, Any] = getattr(feed, "feed", {}) or {}
    val = meta.get(key)
    if isinstance(val, str) and val.strip():
        return val.strip()
    return None


def fetch_feed_items(url: str, *, source_feed_url: Optional[str] = None) -> List[FeedItem]:
    """
    Fetch one feed and map its entries onto FeedItem.

    `source_feed_url` defaults to `url`; pass it explicitly when `url` is
    a raw document rather than the feed's address.
    """
    feed = fetch_feed(url)
    feed_id = source_feed_url or url
    source = _feed_meta(feed, "title")
    source_url = _feed_meta(feed, "link")

    items: List[FeedItem] = []
    for entry in feed.entries:
        try:
            items.append(
                to_feed_item(
                    parse_entry(entry),
                    source_feed_url=feed_id,
                    source=source,
                    source_url=source_url,
                )
            )
        except ValueError:
            logger.debug("feed_entry_skipped", feed=feed_id, title=entry.get("title"))
            continue
    return items


def fetch_rss(urls: Iterable[str]) -> List[FeedItem]:
    """
    Fetch multiple feeds and aggregate all items into a single list.

    Failures on individual URLs are isolated and do not abort the whole batch;
    they are logged and skipped to favor best-effort aggregation.
    """
    all_items: List[FeedItem] = []
    for u in urls:
        try:
            all_items.extend(fetch_feed_items(u))
        except RSSFetchError as e:
            logger.warning("feed_fetch_failed", feed=u, error=str(e))
            continue
    return all_items
