# blogfront/models.py
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ArticleDraft(BaseModel):
    """An article as posted to the record store, before it has an id."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    description: str
    category: List[str] = Field(default_factory=list)
    date: str = ""
    cover_image: str = Field(default="", alias="coverImage")
    content: str

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class Article(ArticleDraft):
    id: int
