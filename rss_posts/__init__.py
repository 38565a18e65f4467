"""
rss_posts

Aggregates the "Recent posts" section of a website homepage from several blogs.

Core ideas:
- Input: RSS/Atom feed URLs and JSON post sources
- Process: fetch → flatten → post-process (per-feed banner / link rewrite) → sort (newest first) → truncate
- Output: List[FeedItem]

Example
-------
from rss_posts import RecentPosts, JsonPostSource

posts = RecentPosts(
    post_sources=[JsonPostSource("https://example.org/posts.json", source="Example")],
    limit=6,
)

for item in posts.items():
    print(item.pub_date, item.source, item.title)

Already-fetched lists can be merged directly with `polish_rss_list(list_a, list_b)`.
"""
from .models import FeedItem
from .pipeline import RecentPosts, polish_rss_list
from .posts import JsonPostSource

__all__ = [
    "FeedItem",
    "JsonPostSource",
    "RecentPosts",
    "polish_rss_list",
]
