"""Page selector model - de-duplicated identity of an external page."""
from typing import TYPE_CHECKING

from sqlalchemy import Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base

if TYPE_CHECKING:
    from models.bookmark_page import BookmarkPage


class PageSelector(Base):
    """
    A page identified by (scope, value), e.g. ("url", "https://example.test/").

    Rows are shared by every bookmark that references the page and are never
    deleted along with a bookmark.
    """

    __tablename__ = "page_selector"
    __table_args__ = (
        Index("selector_index", "scope", "value", unique=True),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    scope: Mapped[str] = mapped_column(Text, nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    bookmark_pages: Mapped[list["BookmarkPage"]] = relationship(back_populates="page")
