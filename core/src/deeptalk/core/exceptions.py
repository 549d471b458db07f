"""Domain errors raised by the service layer."""


class PostNotFoundError(LookupError):
    """Raised when a post id does not match any stored post."""

    def __init__(self, post_id: str):
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id
