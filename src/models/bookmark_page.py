"""Association between a bookmark and a page selector."""
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base

if TYPE_CHECKING:
    from models.bookmark import Bookmark
    from models.page_selector import PageSelector


class BookmarkPage(Base):
    """A page attached to a bookmark, with bookmark-specific title and description."""

    __tablename__ = "bookmark_page"

    page_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("page_selector.id"),
        primary_key=True,
    )
    bookmark_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("bookmark.id"),
        primary_key=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    desc: Mapped[str] = mapped_column("description", Text, nullable=False)

    page: Mapped["PageSelector"] = relationship(back_populates="bookmark_pages")
    bookmark: Mapped["Bookmark"] = relationship(back_populates="pages")
