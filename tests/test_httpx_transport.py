import json

import httpx
import pytest

from wpcontent.integrations.clients.real_http.transport import HttpxTransport
from wpcontent.integrations.clients.real_http.wordpress import WordPressClient
from wpcontent.utils.log_sink import RecordingSink


RECORDS = [
    {
        "id": 11,
        "date": "2003-05-27T00:00:00",
        "modified": "2003-05-28T00:00:00",
        "link": "https://wordpress.org/news/2003/05/wordpress-now-available/",
        "title": {"rendered": "<p>Hello &amp; World</p>"},
        "excerpt": {"rendered": "<p>Short</p>", "protected": False},
        "content": {"rendered": "<p>Long<br>text</p>", "protected": False},
        "_links": {"self": [{"href": "https://wordpress.org/news/wp-json/wp/v2/posts/11"}]},
    }
]


def _handler(seen):
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.endswith("/posts"):
            headers = {"X-WP-Total": "1", "X-WP-TotalPages": "1"}
            if request.method == "HEAD":
                return httpx.Response(200, headers=headers)
            return httpx.Response(200, json=RECORDS, headers=headers)
        if request.url.path.endswith("/posts/11"):
            return httpx.Response(200, json=RECORDS[0])
        return httpx.Response(404, json={"code": "rest_post_invalid_id", "message": "Invalid post ID."})

    return handler


def _transport(seen, **kwargs) -> HttpxTransport:
    client = httpx.AsyncClient(transport=httpx.MockTransport(_handler(seen)))
    return HttpxTransport(client=client, **kwargs)


@pytest.mark.asyncio
async def test_get_returns_lowercased_headers_and_json_body():
    seen = []
    transport = _transport(seen, user_agent="wpcontent-tests")

    result = await transport.get("https://wordpress.org/news/wp-json/wp/v2/posts")

    assert result.status_code == 200
    assert result.headers["x-wp-total"] == "1"
    assert result.headers["x-wp-totalpages"] == "1"
    assert result.body == RECORDS
    assert seen[0].headers["user-agent"] == "wpcontent-tests"
    assert seen[0].headers["accept"] == "application/json"


@pytest.mark.asyncio
async def test_head_discards_body():
    seen = []
    transport = _transport(seen)

    result = await transport.head("https://wordpress.org/news/wp-json/wp/v2/posts")

    assert seen[0].method == "HEAD"
    assert result.body is None
    assert result.headers["x-wp-total"] == "1"


@pytest.mark.asyncio
async def test_non_2xx_raises_http_status_error():
    transport = _transport([])

    with pytest.raises(httpx.HTTPStatusError) as exc:
        await transport.get("https://wordpress.org/news/wp-json/wp/v2/posts/404")
    assert exc.value.response.status_code == 404


@pytest.mark.asyncio
async def test_timeouts_propagate_unchanged():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    wp = WordPressClient("https://example.org", transport=HttpxTransport(client=client), log_sink=RecordingSink())

    with pytest.raises(httpx.ConnectTimeout):
        await wp.fetch_posts()


@pytest.mark.asyncio
async def test_malformed_json_propagates():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>not json</html>", headers={"Content-Type": "application/json"})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    transport = HttpxTransport(client=client)

    with pytest.raises(json.JSONDecodeError):
        await transport.get("https://example.org/wp-json/wp/v2/posts")


@pytest.mark.asyncio
async def test_injected_client_is_not_closed():
    client = httpx.AsyncClient(transport=httpx.MockTransport(_handler([])))
    transport = HttpxTransport(client=client)

    await transport.aclose()

    assert client.is_closed is False
    await client.aclose()


@pytest.mark.asyncio
async def test_owned_client_is_closed():
    transport = HttpxTransport(timeout_seconds=5.0)
    inner = transport._get_client()

    await transport.aclose()

    assert inner.is_closed is True


@pytest.mark.asyncio
async def test_client_over_httpx_transport_end_to_end():
    seen = []
    wp = WordPressClient(
        "https://wordpress.org/news",
        transport=_transport(seen),
        log_sink=RecordingSink(),
    )

    response = await wp.fetch_posts(order="asc")
    post = await wp.fetch_post(11)
    total = await wp.count_posts()

    assert seen[0].url.path == "/news/wp-json/wp/v2/posts"
    assert seen[0].url.params["order"] == "asc"
    assert seen[0].url.params["per_page"] == "10"
    assert seen[0].url.params["offset"] == "0"
    assert response.total == 1
    assert response.items[0].title == "Hello & World"
    assert post.link == "https://wordpress.org/news/2003/05/wordpress-now-available"
    assert post.content == "Long\ntext"
    assert total == 1


@pytest.mark.asyncio
async def test_empty_response_bodies_are_tolerated():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/posts"):
            return httpx.Response(200, headers={"X-WP-Total": "0", "X-WP-TotalPages": "0"})
        return httpx.Response(200)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    wp = WordPressClient("https://example.org", transport=HttpxTransport(client=client), log_sink=RecordingSink())

    response = await wp.fetch_posts()
    item = await wp.fetch_post(5)

    assert response.items == []
    assert response.total == 0
    assert response.total_pages == 0
    assert item.id is None
    assert item.content == ""
