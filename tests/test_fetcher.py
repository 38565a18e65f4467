import pytest
from structlog.testing import capture_logs

from rss_posts.constants import VITALIK_FEED
from rss_posts.exceptions import RSSFetchError
from rss_posts.fetcher import fetch_feed_items, fetch_rss
from rss_posts.pipeline import polish_rss_list

RSS_DOC = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Vitalik Buterin's website</title>
    <link>https://vitalik.ca/</link>
    <description>Blog</description>
    <item>
      <title>Older post</title>
      <link>https://vitalik.ca/general/2024/01/01/older.html</link>
      <pubDate>Mon, 01 Jan 2024 00:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Newer post</title>
      <link>https://vitalik.ca/general/2024/02/01/newer.html</link>
      <pubDate>Thu, 01 Feb 2024 00:00:00 GMT</pubDate>
    </item>
    <item>
      <title>No link</title>
      <pubDate>Thu, 01 Feb 2024 00:00:00 GMT</pubDate>
    </item>
  </channel>
</rss>
"""

BROKEN_DOC = "<rss><channel><item><title>oops</channel>"


def test_fetch_feed_items_maps_entries():
    items = fetch_feed_items(RSS_DOC, source_feed_url=VITALIK_FEED)

    assert [it.title for it in items] == ["Older post", "Newer post"]
    first = items[0]
    assert first.link == "https://vitalik.ca/general/2024/01/01/older.html"
    assert first.pub_date == "Mon, 01 Jan 2024 00:00:00 GMT"
    assert first.source_feed_url == VITALIK_FEED
    assert first.source == "Vitalik Buterin's website"
    assert first.source_url == "https://vitalik.ca/"
    assert first.img_src is None


def test_fetch_feed_items_raises_on_malformed_feed():
    with pytest.raises(RSSFetchError):
        fetch_feed_items(BROKEN_DOC)


def test_fetch_rss_skips_failed_feeds():
    with capture_logs() as logs:
        items = fetch_rss([BROKEN_DOC, RSS_DOC])

    assert len(items) == 2
    failures = [e for e in logs if e["event"] == "feed_fetch_failed"]
    assert len(failures) == 1
    assert failures[0]["log_level"] == "warning"


def test_fetched_feed_through_pipeline():
    items = fetch_feed_items(RSS_DOC, source_feed_url=VITALIK_FEED)

    out = polish_rss_list(items)

    assert [it.title for it in out] == ["Newer post", "Older post"]
    assert out[0].link == "https://vitalik.eth.limo/general/2024/02/01/newer.html"
    assert out[0].img_src == "/images/vitalik-blog-banner.svg"
