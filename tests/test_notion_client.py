"""
Export capability: page creation plus batched appends.
"""

import math
import threading

import pytest

from engine.config import EngineConfig
from notion.client import NotionClient, NotionConfig, batch_blocks
from notion.errors import ExportError, MissingAPIKey, MissingDatabaseID
from tests.conftest import FakeResponse, FakeSession

CONFIG = NotionConfig(api_key="secret", database_id="db-1")
PAGE = {"object": "page", "id": "page-1", "url": "https://notion.so/page-1"}


def _paragraphs(n):
    return "".join(f"<p>{i}</p>" for i in range(n))


def _client(session, max_blocks=100):
    return NotionClient(CONFIG, EngineConfig(max_blocks_per_request=max_blocks), session=session)


def test_requires_credentials():
    with pytest.raises(MissingAPIKey):
        NotionClient(NotionConfig(database_id="db"), session=FakeSession())
    with pytest.raises(MissingDatabaseID):
        NotionClient(NotionConfig(api_key="k"), session=FakeSession())


def test_session_headers():
    session = FakeSession()
    _client(session)
    assert session.headers["Authorization"] == "Bearer secret"
    assert session.headers["Notion-Version"] == "2022-06-28"


def test_small_page_is_one_request():
    session = FakeSession([FakeResponse(200, PAGE)])

    url = _client(session).create_page("Title", "<h1>Hi</h1><p>body</p>")

    assert url == "https://notion.so/page-1"
    assert len(session.requests) == 1
    method, endpoint, kwargs = session.requests[0]
    assert (method, endpoint) == ("POST", "https://api.notion.com/v1/pages")
    body = kwargs["json"]
    assert body["parent"] == {"database_id": "db-1"}
    assert body["properties"]["Name"]["title"][0]["text"]["content"] == "Title"
    assert [c["type"] for c in body["children"]] == ["heading_1", "paragraph"]


@pytest.mark.parametrize("n", [1, 100, 101, 250, 300])
def test_append_batches(n):
    session = FakeSession([FakeResponse(200, PAGE)])

    _client(session).create_page("T", _paragraphs(n))

    create, appends = session.requests[0], session.requests[1:]
    assert len(create[2]["json"]["children"]) == min(n, 100)
    assert len(appends) == math.ceil(max(0, n - 100) / 100)

    sent = [c["paragraph"]["rich_text"][0]["text"]["content"] for c in create[2]["json"]["children"]]
    for method, endpoint, kwargs in appends:
        assert method == "PATCH"
        assert endpoint == "https://api.notion.com/v1/blocks/page-1/children"
        assert len(kwargs["json"]["children"]) <= 100
        sent += [c["paragraph"]["rich_text"][0]["text"]["content"] for c in kwargs["json"]["children"]]
    assert sent == [str(i) for i in range(n)]


def test_create_failure_has_no_page():
    session = FakeSession([FakeResponse(400, None, text="validation_error")])

    with pytest.raises(ExportError) as exc:
        _client(session).create_page("T", "<p>x</p>")

    assert not exc.value.page_created
    assert exc.value.page_url is None
    assert "400" in str(exc.value)


def test_append_failure_reports_created_page():
    session = FakeSession([
        FakeResponse(200, PAGE),
        FakeResponse(200, {}),
        FakeResponse(500, None, text="boom"),
    ])

    with pytest.raises(ExportError) as exc:
        _client(session).create_page("T", _paragraphs(350))

    err = exc.value
    assert err.page_created
    assert err.page_id == "page-1"
    assert err.page_url == "https://notion.so/page-1"
    assert err.appended_batches == 1
    assert str(err).startswith("page created but failed to append remaining blocks")
    assert len(session.requests) == 3


def test_response_without_id_is_an_error():
    session = FakeSession([FakeResponse(200, {"object": "page"})])
    with pytest.raises(ExportError):
        _client(session).create_page("T", "<p>x</p>")


def test_cancel_before_create_sends_nothing():
    session = FakeSession()
    cancel = threading.Event()
    cancel.set()

    with pytest.raises(ExportError):
        _client(session).create_page("T", "<p>x</p>", cancel=cancel)
    assert session.requests == []


def test_cancel_between_batches_reports_partial_progress():
    cancel = threading.Event()

    class CancellingSession(FakeSession):
        def request(self, method, url, **kwargs):
            response = super().request(method, url, **kwargs)
            if method == "PATCH":
                cancel.set()
            return response

    session = CancellingSession([FakeResponse(200, PAGE)])

    with pytest.raises(ExportError) as exc:
        _client(session, max_blocks=10).create_page("T", _paragraphs(35), cancel=cancel)

    assert exc.value.page_id == "page-1"
    assert exc.value.appended_batches == 1
    assert len(session.requests) == 2


def test_batch_blocks():
    assert batch_blocks(list(range(5)), 2) == [[0, 1], [2, 3], [4]]
    assert batch_blocks([], 2) == []
