"""Bookmark model - a named group of pages and tags."""
from typing import TYPE_CHECKING

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from models.bookmark_page import BookmarkPage
    from models.bookmark_tag import BookmarkTag


class Bookmark(Base, TimestampMixin):
    """
    Bookmark group.

    Tags and page associations are removed explicitly when a bookmark is
    deleted; there is no ON DELETE CASCADE on the child tables.
    """

    __tablename__ = "bookmark"
    # AUTOINCREMENT on SQLite so ids of deleted bookmarks are never reused
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    desc: Mapped[str] = mapped_column("description", Text, nullable=False)

    pages: Mapped[list["BookmarkPage"]] = relationship(
        back_populates="bookmark",
        order_by="BookmarkPage.page_id",
    )
    tags: Mapped[list["BookmarkTag"]] = relationship(
        back_populates="bookmark",
        primaryjoin="Bookmark.id == foreign(BookmarkTag.bookmark_id)",
        order_by="BookmarkTag.id",
    )
