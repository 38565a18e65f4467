from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from .models import FeedItem
from .parser import parse_pub_date


def format_pub_date(value: str, fmt: str = "%Y-%m-%d") -> str:
    """Format a raw pub_date; unparseable values are returned unchanged."""
    dt = parse_pub_date(value)
    if dt is None:
        return value
    return dt.strftime(fmt)


def format_posts(
    items: Iterable[FeedItem],
    *,
    heading: str = "Recent posts",
    community_blogs: Optional[Sequence[Tuple[str, str]]] = None,
    date_format: str = "%Y-%m-%d",
) -> str:
    """
    Render the polished list as plain text.

    One block per post (title, source and date, link), then the
    "read more" links when `community_blogs` is given.
    """
    lines = [heading, ""]
    items = list(items)
    if not items:
        lines.append("No posts found.")
        lines.append("")
    for item in items:
        source = item.source or item.source_feed_url
        lines.append(item.title or item.link)
        lines.append(f"  {source} - {format_pub_date(item.pub_date, date_format)}")
        lines.append(f"  {item.link}")
        lines.append("")

    if community_blogs:
        lines.append("Read more on these websites")
        for name, href in community_blogs:
            lines.append(f"  {name}: {href}")
        lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"
