"""CRUD operations for posts."""

from typing import Any, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.post import Post

UPDATABLE_FIELDS = ("title", "content")


class CRUDPost:
    """Storage access for :class:`Post` rows."""

    async def create(self, db: AsyncSession, post: Post) -> Post:
        """Insert a new post, assigning its id and creation time first."""
        post.prepare_for_insert()
        db.add(post)
        await db.commit()
        await db.refresh(post)
        return post

    async def get(self, db: AsyncSession, post_id: str) -> Optional[Post]:
        result = await db.execute(
            select(Post).where(Post.id == post_id).execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_multi(
        self,
        db: AsyncSession,
        offset: int = 0,
        limit: int = 20,
        author_id: Optional[str] = None,
    ) -> list[Post]:
        """List posts newest first."""
        query = select(Post)
        if author_id is not None:
            query = query.where(Post.author_id == author_id)
        query = query.order_by(Post.created_at.desc(), Post.id).offset(offset).limit(limit)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def count(self, db: AsyncSession, author_id: Optional[str] = None) -> int:
        query = select(func.count()).select_from(Post)
        if author_id is not None:
            query = query.where(Post.author_id == author_id)
        result = await db.execute(query)
        return result.scalar_one()

    async def update(self, db: AsyncSession, post: Post, changes: dict[str, Any]) -> Post:
        """Apply title/content changes; any other key is ignored."""
        for field in UPDATABLE_FIELDS:
            if changes.get(field) is not None:
                setattr(post, field, changes[field])
        await db.commit()
        await db.refresh(post)
        return post

    async def delete(self, db: AsyncSession, post: Post) -> None:
        await db.delete(post)
        await db.commit()

    async def increment_likes(self, db: AsyncSession, post_id: str, delta: int) -> Optional[int]:
        """Atomically add ``delta`` to the stored like counter.

        Negative deltas are only applied when the counter stays non-negative.
        Returns the new count, or None when no row was updated.
        """
        stmt = (
            update(Post)
            .where(Post.id == post_id)
            .values(likes_count=Post.likes_count + delta)
            .execution_options(synchronize_session=False)
        )
        if delta < 0:
            stmt = stmt.where(Post.likes_count + delta >= 0)
        result = await db.execute(stmt)
        if result.rowcount == 0:
            await db.commit()
            return None

        # Read inside the same transaction, while the UPDATE still holds the row lock.
        count = await db.execute(select(Post.likes_count).where(Post.id == post_id))
        new_count = count.scalar_one()
        await db.commit()
        return new_count


crud_posts = CRUDPost()
