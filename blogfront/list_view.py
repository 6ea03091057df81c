# blogfront/list_view.py
from dataclasses import dataclass, field
from typing import List, Optional

from .formatting import short_date
from .query_cache import QueryCache, QueryResult
from .store import RecordStore

BLOGS_KEY = ("blogs",)
CARD_CATEGORIES = 2


@dataclass
class ArticleCard:
    id: int
    title: str
    description: str
    categories: List[str]
    date: str
    selected: bool = False


@dataclass
class ListState:
    result: QueryResult
    cards: List[ArticleCard] = field(default_factory=list)

    @property
    def is_pending(self):
        return self.result.is_pending

    @property
    def error(self):
        return self.result.error if self.result.is_error else None


def build_state(result: QueryResult, selected_id: Optional[int] = None) -> ListState:
    """Cards follow the store's order; nothing is re-sorted here."""
    state = ListState(result=result)
    if result.is_success:
        state.cards = [
            ArticleCard(
                id=a.id,
                title=a.title,
                description=a.description,
                categories=list(a.category[:CARD_CATEGORIES]),
                date=short_date(a.date),
                selected=a.id == selected_id,
            )
            for a in result.data
        ]
    return state


def load_articles(cache: QueryCache, store: RecordStore, selected_id: Optional[int] = None) -> ListState:
    return build_state(cache.fetch(BLOGS_KEY, store.list_articles), selected_id)
