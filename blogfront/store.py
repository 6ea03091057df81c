# blogfront/store.py
"""HTTP client for the record store that owns the articles.

The store is a plain id-keyed collection (``/blogs``). It has no rules of
its own; everything here is transport plus decoding into ``Article``.
"""
import logging
from typing import List

import requests
from pydantic import TypeAdapter, ValidationError

from .models import Article, ArticleDraft

log = logging.getLogger(__name__)

_article_list = TypeAdapter(List[Article])


class StoreError(Exception):
    pass


class StoreUnavailable(StoreError):
    pass


class StoreStatusError(StoreError):
    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        super().__init__(message or f"record store answered {status_code}")


class ArticleNotFound(StoreStatusError):
    def __init__(self, article_id: int):
        self.article_id = article_id
        super().__init__(404, f"article {article_id} not found")


class InvalidPayload(StoreError):
    pass


class RecordStore:
    def __init__(self, base_url: str, timeout: float = 10, session: requests.Session = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            r = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            log.warning("%s %s failed: %s", method, path, e)
            raise StoreUnavailable(str(e)) from e
        if not r.ok:
            log.warning("%s %s answered %s", method, path, r.status_code)
            if r.status_code == 404 and method == "GET" and path.startswith("/blogs/"):
                raise ArticleNotFound(int(path.rsplit("/", 1)[-1]))
            raise StoreStatusError(r.status_code)
        try:
            return r.json()
        except ValueError as e:
            log.warning("%s %s returned a non-JSON body", method, path)
            raise InvalidPayload(f"{method} {path}: body is not JSON") from e

    def list_articles(self) -> List[Article]:
        body = self._request("GET", "/blogs")
        try:
            return _article_list.validate_python(body)
        except ValidationError as e:
            log.warning("GET /blogs returned malformed articles: %s", e)
            raise InvalidPayload(str(e)) from e

    def get_article(self, article_id: int) -> Article:
        body = self._request("GET", f"/blogs/{int(article_id)}")
        try:
            return Article.model_validate(body)
        except ValidationError as e:
            log.warning("GET /blogs/%s returned a malformed article: %s", article_id, e)
            raise InvalidPayload(str(e)) from e

    def create_article(self, draft: ArticleDraft) -> Article:
        body = self._request("POST", "/blogs", json=draft.to_wire())
        try:
            created = Article.model_validate(body)
        except ValidationError as e:
            log.warning("POST /blogs returned a malformed article: %s", e)
            raise InvalidPayload(str(e)) from e
        log.info("created article %s (%r)", created.id, created.title)
        return created
