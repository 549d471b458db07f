"""Services module for community posts."""

from .author_service import AuthorService, SnapshotAuthorService
from .like_service import LikeService
from .post_service import PostService

__all__ = [
    "AuthorService",
    "SnapshotAuthorService",
    "PostService",
    "LikeService",
]
