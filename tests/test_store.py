"""RecordStore against a mocked requests session (no network)."""

from unittest.mock import Mock

import pytest
import requests

from blogfront.models import ArticleDraft
from blogfront.store import (
    ArticleNotFound, InvalidPayload, RecordStore, StoreStatusError, StoreUnavailable,
)

RAW = {
    "id": 7,
    "title": "Seventh",
    "description": "desc",
    "category": ["Tech"],
    "date": "2025-01-05T10:00:00.000Z",
    "coverImage": "https://example.com/c.jpg",
    "content": "body",
}


def _response(status=200, body=None, bad_json=False):
    r = Mock()
    r.status_code = status
    r.ok = 200 <= status < 400
    if bad_json:
        r.json.side_effect = ValueError("no json")
    else:
        r.json.return_value = body
    return r


def _store(response=None, exc=None):
    session = Mock()
    if exc is not None:
        session.request.side_effect = exc
    else:
        session.request.return_value = response
    return RecordStore("http://localhost:3001/", timeout=5, session=session), session


class TestReads:
    def test_list_keeps_store_order(self):
        body = [dict(RAW, id=i, title=f"t{i}") for i in (3, 1, 2)]
        store, session = _store(_response(body=body))
        articles = store.list_articles()
        assert [a.id for a in articles] == [3, 1, 2]
        session.request.assert_called_once_with("GET", "http://localhost:3001/blogs", timeout=5)

    def test_get_article_url_and_fields(self):
        store, session = _store(_response(body=RAW))
        a = store.get_article(7)
        session.request.assert_called_once_with("GET", "http://localhost:3001/blogs/7", timeout=5)
        assert a.title == "Seventh"
        assert a.cover_image == "https://example.com/c.jpg"

    def test_missing_optional_fields_default(self):
        body = {k: v for k, v in RAW.items() if k not in ("category", "coverImage")}
        store, _ = _store(_response(body=body))
        a = store.get_article(7)
        assert a.category == []
        assert a.cover_image == ""

    def test_not_found(self):
        store, _ = _store(_response(status=404))
        with pytest.raises(ArticleNotFound) as ei:
            store.get_article(9)
        assert ei.value.status_code == 404
        assert ei.value.article_id == 9

    def test_server_error(self):
        store, _ = _store(_response(status=503))
        with pytest.raises(StoreStatusError) as ei:
            store.list_articles()
        assert ei.value.status_code == 503

    def test_transport_failure(self):
        store, _ = _store(exc=requests.ConnectionError("refused"))
        with pytest.raises(StoreUnavailable):
            store.list_articles()

    def test_non_json_body(self):
        store, _ = _store(_response(bad_json=True))
        with pytest.raises(InvalidPayload):
            store.list_articles()

    def test_malformed_article(self):
        store, _ = _store(_response(body=[{"id": "x"}]))
        with pytest.raises(InvalidPayload):
            store.list_articles()


class TestCreate:
    def test_posts_wire_names(self):
        store, session = _store(_response(status=201, body=dict(RAW, id=12)))
        draft = ArticleDraft(
            title="New", description="d", category=["a"], date="2025-01-05T10:00:00.000Z",
            coverImage="https://via.placeholder.com/800x400", content="c",
        )
        created = store.create_article(draft)
        assert created.id == 12
        session.request.assert_called_once_with(
            "POST", "http://localhost:3001/blogs", timeout=5,
            json={
                "title": "New", "description": "d", "category": ["a"],
                "date": "2025-01-05T10:00:00.000Z",
                "coverImage": "https://via.placeholder.com/800x400", "content": "c",
            },
        )

    def test_rejected_write(self):
        store, _ = _store(_response(status=500))
        draft = ArticleDraft(title="t", description="d", content="c")
        with pytest.raises(StoreStatusError):
            store.create_article(draft)
