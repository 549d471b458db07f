"""Like counter updates for posts."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import PostNotFoundError
from ..crud.crud_posts import crud_posts
from ..schemas.post import LikeResult

LOGGER = logging.getLogger(__name__)


class LikeService:
    """Increment and decrement the like counter of a post.

    Counter changes are done as a single UPDATE at the storage layer so
    concurrent likes never lose increments.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def like(self, post_id: str) -> LikeResult:
        count = await crud_posts.increment_likes(self.db, post_id, 1)
        if count is None:
            raise PostNotFoundError(post_id)
        LOGGER.debug(f"Post {post_id} liked, count={count}")
        return LikeResult(post_id=post_id, likes_count=count, liked=True)

    async def unlike(self, post_id: str) -> LikeResult:
        count = await crud_posts.increment_likes(self.db, post_id, -1)
        if count is None:
            # Either the post is gone or the counter is already at zero.
            post = await crud_posts.get(self.db, post_id)
            if post is None:
                raise PostNotFoundError(post_id)
            LOGGER.info(f"Unlike ignored for post {post_id}: counter already at {post.likes_count}")
            return LikeResult(post_id=post_id, likes_count=post.likes_count, liked=False)
        LOGGER.debug(f"Post {post_id} unliked, count={count}")
        return LikeResult(post_id=post_id, likes_count=count, liked=False)
