"""Free-text tag attached to a bookmark."""
from typing import TYPE_CHECKING

from sqlalchemy import Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base

if TYPE_CHECKING:
    from models.bookmark import Bookmark


class BookmarkTag(Base):
    """
    Tag model - unique per (bookmark_id, tag).

    bookmark_id carries no foreign key: tagging an unknown bookmark id succeeds.
    """

    __tablename__ = "bookmark_tag"
    __table_args__ = (
        Index("tag_index", "bookmark_id", "tag", unique=True),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    bookmark_id: Mapped[int] = mapped_column(Integer, nullable=False)
    tag: Mapped[str] = mapped_column(Text, nullable=False)

    bookmark: Mapped["Bookmark"] = relationship(
        back_populates="tags",
        primaryjoin="Bookmark.id == foreign(BookmarkTag.bookmark_id)",
    )
