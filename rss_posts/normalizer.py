from __future__ import annotations

from typing import Any, Dict, Optional

from .models import FeedItem


def to_feed_item(
    entry: Dict[str, Any],
    *,
    source_feed_url: str,
    source: Optional[str] = None,
    source_url: Optional[str] = None,
) -> FeedItem:
    """
    Convert a parsed entry dict into a FeedItem.
    Requires:
    - link (non-empty)
    Optional:
    - title, pub_date (an unparseable date is kept; ranking tolerates it)
    """
    title = entry.get("title") or ""
    link = entry.get("link") or ""
    pub_date = entry.get("pub_date") or ""

    if not link:
        raise ValueError("Entry lacks required field for FeedItem: link")

    return FeedItem(
        title=title,
        link=link,
        pub_date=pub_date,
        source_feed_url=source_feed_url,
        source=source,
        source_url=source_url,
    )
