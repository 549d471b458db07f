"""CRUD module init."""

from .crud_posts import crud_posts

__all__ = ["crud_posts"]
