"""SQLAlchemy models."""
from models.base import Base, TimestampMixin, UTCDateTime, utc_now
from models.bookmark import Bookmark
from models.bookmark_page import BookmarkPage
from models.bookmark_tag import BookmarkTag
from models.page_selector import PageSelector

__all__ = [
    "Base",
    "Bookmark",
    "BookmarkPage",
    "BookmarkTag",
    "PageSelector",
    "TimestampMixin",
    "UTCDateTime",
    "utc_now",
]
