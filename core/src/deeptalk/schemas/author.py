"""Author schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class AuthorProfile(BaseModel):
    """Display data for a post author, resolved at read time."""

    id: str
    name: str
    avatar: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=500)

    class Config:
        from_attributes = True
