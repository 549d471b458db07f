"""Post schemas for request/response validation."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .author import AuthorProfile

TITLE_MAX_LENGTH = 255
CONTENT_MAX_LENGTH = 1000


def _strip_required(value: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise ValueError("must not be blank")
    return stripped


class PostBase(BaseModel):
    """Base schema for post."""
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(..., min_length=1, max_length=CONTENT_MAX_LENGTH)

    @field_validator("title", "content")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        return _strip_required(value)


class PostCreate(PostBase):
    """Schema for creating a post.

    The author fields are supplied by the caller's user service and stored as
    a snapshot on the post.
    """
    author_id: str = Field(..., min_length=1, max_length=255)
    author_name: str = Field(..., min_length=1, max_length=255)
    author_avatar: Optional[str] = Field(None, max_length=512)

    @field_validator("author_name")
    @classmethod
    def _author_name_not_blank(cls, value: str) -> str:
        return _strip_required(value)


class PostUpdate(BaseModel):
    """Schema for updating a post."""
    title: Optional[str] = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    content: Optional[str] = Field(None, min_length=1, max_length=CONTENT_MAX_LENGTH)

    @field_validator("title", "content")
    @classmethod
    def _not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return _strip_required(value)


class PostRead(BaseModel):
    """Schema for reading a post."""
    id: str
    title: str
    content: str
    author_id: str
    author_name: str
    author_avatar: Optional[str] = None
    created_at: datetime
    likes_count: int
    author: Optional[AuthorProfile] = None

    class Config:
        from_attributes = True


class PostList(BaseModel):
    """Schema for listing posts."""
    items: list[PostRead]
    total: int
    page: int = 1
    page_size: int = 20


class LikeResult(BaseModel):
    """Result of a like or unlike."""
    post_id: str
    likes_count: int
    liked: bool
