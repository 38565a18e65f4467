import httpx
import pytest
from structlog.testing import capture_logs

from rss_posts.exceptions import ParseError, RSSFetchError
from rss_posts.posts import JsonPostSource, fetch_posts

URL = "https://posts.test/api/posts"


def _source(handler, **kw):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return JsonPostSource(URL, source="Attestant", source_url="https://posts.test/", client=client, **kw)


def test_fetch_maps_json_posts():
    def handler(request):
        assert request.url == URL
        return httpx.Response(
            200,
            json=[
                {"title": "Staking", "link": "https://posts.test/staking", "pubDate": "2024-03-01T00:00:00Z"},
                {"title": "Alt keys", "url": "https://posts.test/alt", "date": "Fri, 01 Mar 2024 00:00:00 GMT"},
                {"title": "No link"},
                "junk",
            ],
        )

    items = _source(handler).fetch()

    assert [it.title for it in items] == ["Staking", "Alt keys"]
    assert items[1].link == "https://posts.test/alt"
    assert items[1].pub_date == "Fri, 01 Mar 2024 00:00:00 GMT"
    assert all(it.source_feed_url == URL for it in items)
    assert items[0].source == "Attestant"
    assert items[0].source_url == "https://posts.test/"


def test_fetch_accepts_wrapped_payload():
    def handler(request):
        return httpx.Response(200, json={"posts": [{"title": "x", "link": "https://posts.test/x"}]})

    items = _source(handler).fetch()

    assert len(items) == 1
    assert items[0].pub_date == ""


def test_http_error_raises_fetch_error():
    def handler(request):
        return httpx.Response(500, text="down")

    with pytest.raises(RSSFetchError):
        _source(handler).fetch()


def test_non_json_raises_parse_error():
    def handler(request):
        return httpx.Response(200, text="<html></html>")

    with pytest.raises(ParseError):
        _source(handler).fetch()


def test_wrong_shape_raises_parse_error():
    def handler(request):
        return httpx.Response(200, json={"items": []})

    with pytest.raises(ParseError):
        _source(handler).fetch()


def test_transport_error_raises_fetch_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(RSSFetchError):
        _source(handler).fetch()


def test_fetch_posts_is_best_effort():
    def ok(request):
        return httpx.Response(200, json=[{"title": "x", "link": "https://posts.test/x"}])

    def broken(request):
        return httpx.Response(404)

    with capture_logs() as logs:
        items = fetch_posts([_source(broken), _source(ok)])

    assert [it.title for it in items] == ["x"]
    assert [e["event"] for e in logs] == ["post_source_failed"]
