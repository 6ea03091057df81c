# blogfront/detail_view.py
from dataclasses import dataclass
from typing import List, Optional

from .formatting import long_date, read_time_label
from .query_cache import QueryCache, QueryResult
from .store import RecordStore


def article_key(article_id: int):
    return ("blog", int(article_id))


@dataclass
class DetailState:
    result: QueryResult
    placeholder_cover: str = ""

    @property
    def is_pending(self):
        return self.result.is_pending

    @property
    def error(self):
        return self.result.error if self.result.is_error else None

    @property
    def article(self):
        return self.result.data if self.result.is_success else None

    @property
    def cover_image(self) -> str:
        return (self.article and self.article.cover_image) or self.placeholder_cover

    @property
    def published(self) -> str:
        return long_date(self.article.date) if self.article else ""

    @property
    def read_time(self) -> str:
        return read_time_label(self.article.content) if self.article else ""

    @property
    def categories(self) -> List[str]:
        return list(self.article.category) if self.article else []


def load_article(cache: QueryCache, store: RecordStore, article_id: Optional[int],
                 placeholder_cover: str = "") -> Optional[DetailState]:
    """Nothing is loaded for an empty selection; the page shows its placeholder instead.

    The article is always read through its own key. Summaries already held
    under the list key are not used as a fallback when that read fails.
    """
    if article_id is None:
        return None
    result = cache.fetch(article_key(article_id), lambda: store.get_article(article_id))
    return DetailState(result=result, placeholder_cover=placeholder_cover)
