"""Service layer for community posts."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import PostNotFoundError
from ..crud.crud_posts import crud_posts
from ..models.post import Post
from ..schemas.post import PostCreate, PostUpdate
from .author_service import AuthorService, SnapshotAuthorService

LOGGER = logging.getLogger(__name__)


class PostService:
    """Create, read, update and delete posts."""

    def __init__(self, db: AsyncSession, author_service: AuthorService | None = None):
        self.db = db
        self.author_service = author_service or SnapshotAuthorService()

    async def create_post(self, data: PostCreate) -> Post:
        """Store a new post for the given author snapshot.

        Args:
            data: Validated post fields and author snapshot

        Returns:
            The stored post with its generated id and creation time
        """
        post = Post(
            title=data.title,
            content=data.content,
            author_id=data.author_id,
            author_name=data.author_name,
            author_avatar=data.author_avatar,
        )
        post = await crud_posts.create(self.db, post)
        LOGGER.info(f"Created post {post.id} by author {post.author_id}")
        return post

    async def get_post(self, post_id: str) -> Post:
        post = await crud_posts.get(self.db, post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def list_posts(
        self,
        page: int = 1,
        page_size: int = 20,
        author_id: Optional[str] = None,
    ) -> tuple[list[Post], int]:
        """Return one page of posts (newest first) and the total count."""
        offset = (page - 1) * page_size
        posts = await crud_posts.get_multi(self.db, offset=offset, limit=page_size, author_id=author_id)
        total = await crud_posts.count(self.db, author_id=author_id)
        return posts, total

    async def update_post(self, post_id: str, data: PostUpdate) -> Post:
        post = await self.get_post(post_id)
        changes = data.model_dump(exclude_unset=True)
        post = await crud_posts.update(self.db, post, changes)
        LOGGER.info(f"Updated post {post_id}: {sorted(changes)}")
        return post

    async def delete_post(self, post_id: str) -> None:
        post = await self.get_post(post_id)
        await crud_posts.delete(self.db, post)
        LOGGER.info(f"Deleted post {post_id}")

    async def enrich(self, posts: list[Post]) -> list[Post]:
        """Attach the transient author profile to each post."""
        if not posts:
            return posts
        authors = await self.author_service.get_authors(posts)
        for post in posts:
            post.attach_author(authors.get(post.author_id))
        return posts
