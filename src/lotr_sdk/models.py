"""Resource documents returned by the API.

Field names follow Python conventions; the camelCase wire names (and the
Mongo-style ``_id``) are handled by pydantic aliases.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Document(BaseModel):
    """Base class for API documents: immutable, built from camelCase JSON."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str = Field(alias="_id")


class Book(Document):
    name: str


class Movie(Document):
    name: str
    runtime_in_minutes: int = 0
    budget_in_millions: float = 0.0
    box_office_revenue_in_millions: float = 0.0
    academy_award_nominations: int = 0
    academy_award_wins: int = 0
    rotten_tomatoes_score: float = 0.0


class Character(Document):
    name: str
    birth: str | None = None
    death: str | None = None
    hair: str | None = None
    realm: str | None = None
    height: str | None = None
    spouse: str | None = None
    gender: str | None = None
    race: str | None = None
    wiki_url: str | None = None


class Quote(Document):
    dialog: str
    movie: str
    character: str


class Chapter(Document):
    chapter_name: str
    book: str | None = None


class Status(BaseModel):
    """Paging metadata sent alongside every document list."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    limit: int = 0
    offset: int = 0
    page: int = 0
    pages: int = 0


D = TypeVar("D", bound=Document)


class Envelope(BaseModel, Generic[D]):
    """Response body: ``{"docs": [...], "total": ..., "limit": ..., ...}``."""

    docs: list[D] = Field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0
    page: int = 0
    pages: int = 0

    @property
    def status(self) -> Status:
        return Status(
            total=self.total,
            limit=self.limit,
            offset=self.offset,
            page=self.page,
            pages=self.pages,
        )
