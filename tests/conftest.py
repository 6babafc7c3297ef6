"""Pytest fixtures for the WordPress content client tests."""

import pytest

from wpcontent.integrations.clients.mocks.fixture_transport import FixtureTransport, make_record
from wpcontent.integrations.clients.real_http.wordpress import WordPressClient
from wpcontent.utils.log_sink import RecordingSink


BASE_URL = "https://example.org"


def _posts(count: int):
    return [
        make_record(
            i,
            title=f"<p>Post {i} &amp; friends</p>",
            excerpt=f"<p>Excerpt {i}</p>",
            content=f"<p>Body of post {i}</p>",
            link=f"https://example.org/{i}/",
            date=f"2020-01-01T00:{i // 60 % 60:02d}:{i % 60:02d}",
        )
        for i in range(1, count + 1)
    ]


def _pages():
    return [
        make_record(2, title="About", link="https://x/about/"),
        make_record(257, title="Features", link="https://x/features/", content="<h2>Fast</h2><p>Very&nbsp;fast.</p>"),
        make_record(300, title="<b>Download</b>", link="https://x/download"),
    ]


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def transport():
    """In-memory WordPress site with 512 posts and a handful of pages."""
    return FixtureTransport({"posts": _posts(512), "pages": _pages()})


@pytest.fixture
def client(transport, sink):
    return WordPressClient(BASE_URL, transport=transport, log_sink=sink)
