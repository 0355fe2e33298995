"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from schemas.page_selector import PageSelector, PageSelectorResponse


DEFAULT_BOOKMARK_NAME = "New group"


class BookmarkCreate(BaseModel):
    """Schema for creating a new bookmark. Omitted fields get server-side defaults."""

    name: str = DEFAULT_BOOKMARK_NAME
    desc: str = ""


class BookmarkUpdate(BaseModel):
    """Schema for updating an existing bookmark. Only fields that are set are written."""

    name: str | None = None
    desc: str | None = None


class BookmarkPageCreate(BaseModel):
    """Schema for attaching a page to a bookmark."""

    page: PageSelector
    title: str
    desc: str


class BookmarkPageResponse(BaseModel):
    """A page attached to a bookmark."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    desc: str
    page: PageSelectorResponse


class BookmarkResponse(BaseModel):
    """
    Schema for bookmark responses.

    Serialized with camelCase keys (createdAt, updatedAt). Tags are flattened to
    their strings.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    name: str
    desc: str
    created_at: datetime
    updated_at: datetime
    tags: list[str]
    pages: list[BookmarkPageResponse]

    @field_validator("tags", mode="before")
    @classmethod
    def flatten_tags(cls, v: list[Any]) -> list[str]:
        """Accept BookmarkTag rows as well as plain strings."""
        return [tag if isinstance(tag, str) else tag.tag for tag in v]
