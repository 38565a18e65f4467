from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain
from typing import Iterable, List, Optional, Sequence

import structlog

from .constants import FEEDS, RSS_DISPLAY_COUNT
from .fetcher import fetch_rss
from .models import FeedItem
from .once import Once
from .postprocess import post_process
from .posts import JsonPostSource, fetch_posts
from .ranking import sort_by_pub_date

logger = structlog.get_logger()


def polish_rss_list(
    *collections: Iterable[FeedItem],
    limit: Optional[int] = RSS_DISPLAY_COUNT,
) -> List[FeedItem]:
    """
    Merge per-source item lists into the homepage list.

    Pipeline: flatten → post-process → sort (newest first) → truncate
    A `limit` of None or <= 0 disables truncation.
    """
    all_items = list(chain.from_iterable(collections))
    ready_for_sorting = post_process(all_items)
    ranked = sort_by_pub_date(ready_for_sorting)
    if limit and limit > 0:
        ranked = ranked[:limit]
    logger.debug("rss_list_polished", collected=len(all_items), kept=len(ranked))
    return ranked


@dataclass
class RecentPostsOptions:
    feed_urls: Sequence[str] = field(default_factory=lambda: list(FEEDS))
    post_sources: Sequence[JsonPostSource] = field(default_factory=list)
    limit: Optional[int] = RSS_DISPLAY_COUNT


class RecentPosts:
    """
    High-level API for one page build: fetch all sources, return the polished list.

    Each source group is fetched at most once per instance, however many
    times `items()` is called. Build a new instance for a new page build.
    """

    def __init__(
        self,
        *,
        feed_urls: Optional[Sequence[str]] = None,
        post_sources: Optional[Sequence[JsonPostSource]] = None,
        limit: Optional[int] = RSS_DISPLAY_COUNT,
    ) -> None:
        self.options = RecentPostsOptions(
            feed_urls=list(FEEDS) if feed_urls is None else list(feed_urls),
            post_sources=list(post_sources or []),
            limit=limit,
        )
        self._xml_feeds: Once[List[FeedItem]] = Once(
            lambda: fetch_rss(self.options.feed_urls)
        )
        self._json_posts: Once[List[FeedItem]] = Once(
            lambda: fetch_posts(self.options.post_sources)
        )

    def items(self) -> List[FeedItem]:
        xml_blogs = self._xml_feeds.get()
        json_posts = self._json_posts.get()
        return polish_rss_list(xml_blogs, json_posts, limit=self.options.limit)
