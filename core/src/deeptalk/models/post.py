"""Community post model."""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Integer, String, Text, text
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import Mapped, mapped_column, validates

from ..core.db.database import Base
from ..core.db.types import UTCDateTime, as_utc
from ..schemas.author import AuthorProfile

TEXT_CHARSET = "utf8mb4"
TEXT_COLLATION = "utf8mb4_unicode_ci"

TITLE_MAX_LENGTH = 255
CONTENT_MAX_LENGTH = 1000
AUTHOR_NAME_MAX_LENGTH = 255


def _collated_varchar(length: int) -> String:
    return String(length).with_variant(
        mysql.VARCHAR(length, charset=TEXT_CHARSET, collation=TEXT_COLLATION), "mysql", "mariadb"
    )


def _collated_text(length: int) -> Text:
    return Text(length).with_variant(
        mysql.TEXT(length, charset=TEXT_CHARSET, collation=TEXT_COLLATION), "mysql", "mariadb"
    )


class Post(Base):
    """A user-authored community post.

    The author columns are a snapshot of the author's display data taken when
    the post was created. ``author`` is an in-memory enrichment only: it is not
    part of the table mapping, so it is never written and a freshly loaded
    post always starts with ``author=None``.

    ``id`` and ``created_at`` stay unset until :meth:`prepare_for_insert` runs,
    which the storage layer calls right before the first write.
    """

    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, init=False)

    title: Mapped[str] = mapped_column(_collated_varchar(TITLE_MAX_LENGTH), nullable=False)
    content: Mapped[str] = mapped_column(_collated_text(CONTENT_MAX_LENGTH), nullable=False)

    # Reference only; authors live in the user service.
    author_id: Mapped[str] = mapped_column("author_id", String(255), index=True, nullable=False)
    author_name: Mapped[str] = mapped_column(
        "author_name", _collated_varchar(AUTHOR_NAME_MAX_LENGTH), nullable=False
    )
    author_avatar: Mapped[Optional[str]] = mapped_column("author_avatar", String(512), default=None)

    created_at: Mapped[datetime] = mapped_column(
        "created_at", UTCDateTime(), index=True, nullable=False, init=False
    )
    likes_count: Mapped[int] = mapped_column(
        "likes_count", Integer, nullable=False, default=0, server_default=text("0")
    )

    # Not mapped: never persisted, never loaded.
    author: Optional[AuthorProfile] = None

    def prepare_for_insert(self) -> None:
        """Assign the generated id and creation time if they are still unset."""
        if self.id is None:
            self.id = str(uuid.uuid4())
        if self.created_at is None:
            self.created_at = datetime.now(timezone.utc)

    def attach_author(self, profile: Optional[AuthorProfile]) -> None:
        self.author = profile

    @validates("created_at")
    def _validate_created_at(self, key: str, value: datetime) -> datetime:
        current = self.__dict__.get(key)
        if current is not None and (value is None or as_utc(value) != as_utc(current)):
            raise ValueError("created_at is immutable once assigned")
        return value

    def __repr__(self) -> str:
        return f"<Post id={self.id!r} title={self.title!r} author_id={self.author_id!r}>"
