# blogfront/creation_form.py
"""New-article form.

States: idle -> submitting -> success (closed) | error (open).
success and error are held until the next submit, which starts again from
idle. A failed validation never leaves idle and never reaches the store.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Mapping, Optional

from .list_view import BLOGS_KEY
from .models import Article, ArticleDraft
from .query_cache import QueryCache
from .store import RecordStore, StoreError

log = logging.getLogger(__name__)

DEFAULT_COVER_URL = "https://via.placeholder.com/800x400"
REQUIRED_FIELDS = ("title", "description", "content")

MSG_MISSING = "Please fill in all required fields."
MSG_FAILED = "Failed to create article. Please try again."
MSG_CREATED = "Article published successfully!"


class FormStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class FormBusy(RuntimeError):
    pass


def normalize_categories(raw: str) -> List[str]:
    """'a, b ,c' -> ['a', 'b', 'c']; empty segments are dropped."""
    return [c.strip() for c in (raw or "").split(",") if c.strip()]


def iso_now(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


@dataclass
class CreationForm:
    title: str = ""
    description: str = ""
    categories: str = ""
    content: str = ""
    cover_image: str = ""
    status: FormStatus = FormStatus.IDLE
    is_open: bool = False
    error: Optional[str] = None
    created: Optional[Article] = None
    default_cover: str = field(default=DEFAULT_COVER_URL, repr=False)

    @classmethod
    def from_mapping(cls, data: Mapping, **kwargs) -> "CreationForm":
        """Build an open form from submitted fields (request.form or a JSON record)."""
        def get(*names):
            for n in names:
                v = data.get(n)
                if v is not None:
                    return v if isinstance(v, str) else str(v)
            return ""

        form = cls(**kwargs)
        form.title = get("title")
        form.description = get("description")
        form.content = get("content")
        form.cover_image = get("cover_image", "coverImage")
        cats = data.get("categories", data.get("category"))
        if isinstance(cats, (list, tuple)):
            cats = ", ".join(str(c) for c in cats)
        form.categories = cats or ""
        form.is_open = True
        return form

    @property
    def is_submitting(self) -> bool:
        return self.status is FormStatus.SUBMITTING

    def open(self):
        self.is_open = True

    def close(self):
        self.is_open = False

    def reset(self):
        self.title = self.description = self.categories = self.content = self.cover_image = ""

    def validate(self) -> List[str]:
        """Names of required fields left empty."""
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    def build_draft(self, now: Optional[datetime] = None) -> ArticleDraft:
        return ArticleDraft(
            title=self.title,
            description=self.description,
            category=normalize_categories(self.categories),
            content=self.content,
            cover_image=self.cover_image or self.default_cover,
            date=iso_now(now),
        )

    def submit(self, store: RecordStore, cache: Optional[QueryCache] = None,
               now: Optional[datetime] = None) -> bool:
        if self.is_submitting:
            raise FormBusy("a submission is already in flight")

        self.status = FormStatus.IDLE
        self.error = None
        self.created = None
        missing = self.validate()
        if missing:
            log.info("create rejected, missing %s", ", ".join(missing))
            self.error = MSG_MISSING
            return False

        draft = self.build_draft(now)
        self.status = FormStatus.SUBMITTING
        try:
            created = store.create_article(draft)
        except StoreError as e:
            log.warning("create failed: %s", e)
            self.status = FormStatus.ERROR
            self.error = MSG_FAILED
            return False

        self.status = FormStatus.SUCCESS
        self.created = created
        self.reset()
        self.close()
        # only after the store has acknowledged the write
        if cache is not None:
            cache.invalidate(BLOGS_KEY)
        return True
