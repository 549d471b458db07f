"""Author lookups used to enrich posts at read time."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from ..models.post import Post
from ..schemas.author import AuthorProfile


class AuthorService(ABC):
    """Resolve author profiles for posts.

    Subclasses talk to whatever owns the user records; the lookup result is
    only ever attached to posts in memory.
    """

    @abstractmethod
    async def get_authors(self, posts: Iterable[Post]) -> dict[str, AuthorProfile]:
        """Map author id to profile for the authors of ``posts``."""
        pass


class SnapshotAuthorService(AuthorService):
    """Build profiles from the author snapshot stored on each post.

    When an author has several posts, the most recent snapshot wins.
    """

    async def get_authors(self, posts: Iterable[Post]) -> dict[str, AuthorProfile]:
        authors: dict[str, AuthorProfile] = {}
        latest: dict[str, Post] = {}
        for post in posts:
            seen = latest.get(post.author_id)
            if seen is None or (post.created_at and seen.created_at and post.created_at > seen.created_at):
                latest[post.author_id] = post

        for author_id, post in latest.items():
            authors[author_id] = AuthorProfile(
                id=author_id,
                name=post.author_name,
                avatar=post.author_avatar,
            )
        return authors
