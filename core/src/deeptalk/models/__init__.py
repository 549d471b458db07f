"""Mapped models for the community store."""

from .post import Post

__all__ = ["Post"]
