import logging

from .config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once for the application process."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT,
    )
    # SQL statements are logged through DATABASE_ECHO, not the root level.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
