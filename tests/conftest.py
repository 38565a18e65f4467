"""Test configuration and fixtures."""
import pytest

from rss_posts.models import FeedItem


@pytest.fixture
def make_item():
    def _make(title="Post", link="https://blog.example.org/post", pub_date="", feed="https://blog.example.org/feed.xml", **kw):
        return FeedItem(title=title, link=link, pub_date=pub_date, source_feed_url=feed, **kw)

    return _make
