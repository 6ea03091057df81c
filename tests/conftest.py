import pytest

from blogfront import create_app
from blogfront.models import Article
from blogfront.query_cache import QueryCache
from blogfront.store import ArticleNotFound, StoreStatusError, StoreUnavailable


def make_article(**overrides) -> Article:
    defaults = dict(
        id=1,
        title="Test Article",
        description="A short summary.",
        category=["Tech", "Design", "Business"],
        date="2025-01-05T10:00:00.000Z",
        coverImage="https://example.com/cover.jpg",
        content="Hello world",
    )
    defaults.update(overrides)
    return Article(**defaults)


class FakeStore:
    """In-memory stand-in for RecordStore that records every request it would make."""

    def __init__(self, articles=None):
        self.articles = list(articles or [])
        self.calls = []
        self.fail_list = False
        self.fail_get = False
        self.fail_create = False

    def list_articles(self):
        self.calls.append(("GET", "/blogs"))
        if self.fail_list:
            raise StoreUnavailable("connection refused")
        return list(self.articles)

    def get_article(self, article_id):
        self.calls.append(("GET", f"/blogs/{article_id}"))
        if self.fail_get:
            raise StoreUnavailable("connection refused")
        for a in self.articles:
            if a.id == article_id:
                return a
        raise ArticleNotFound(article_id)

    def create_article(self, draft):
        self.calls.append(("POST", "/blogs"))
        if self.fail_create:
            raise StoreStatusError(500)
        next_id = max((a.id for a in self.articles), default=0) + 1
        created = Article(id=next_id, **draft.model_dump())
        self.articles.append(created)
        return created

    def count(self, method, path):
        return self.calls.count((method, path))


@pytest.fixture
def store():
    return FakeStore([
        make_article(id=1, title="First", content="one two three"),
        make_article(id=7, title="Seventh", content="Body of seven"),
        make_article(id=3, title="Third", category=[]),
    ])


@pytest.fixture
def cache():
    return QueryCache()


@pytest.fixture
def app(store, cache):
    app = create_app({"TESTING": True, "SECRET_KEY": "test"}, store=store, cache=cache)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
