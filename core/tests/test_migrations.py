"""The alembic revisions build the same posts table as the model."""

import importlib.util
from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic.migration import MigrationContext
from alembic.operations import Operations

from deeptalk.models.post import Post

VERSIONS_DIR = Path(__file__).resolve().parent.parent / "src" / "migrations" / "versions"


def _load_revision(filename: str):
    spec = importlib.util.spec_from_file_location(filename.removesuffix(".py"), VERSIONS_DIR / filename)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def migrated_connection():
    """Run the posts revision against a fresh SQLite database."""
    revision = _load_revision("7d3a91c4e2b0_create_posts_table.py")
    engine = sa.create_engine("sqlite://")
    with engine.begin() as conn:
        context = MigrationContext.configure(conn)
        with Operations.context(context):
            revision.upgrade()
        yield conn
    engine.dispose()


class TestPostsMigration:
    """Schema produced by the migration against the mapped table."""

    def test_columns_match_model(self, migrated_connection):
        inspector = sa.inspect(migrated_connection)
        migrated = {col["name"]: col for col in inspector.get_columns("posts")}

        assert set(migrated) == set(Post.__table__.columns.keys())
        for column in Post.__table__.columns:
            assert migrated[column.name]["nullable"] == column.nullable, column.name

    def test_primary_key_matches_model(self, migrated_connection):
        inspector = sa.inspect(migrated_connection)

        assert inspector.get_pk_constraint("posts")["constrained_columns"] == ["id"]

    def test_indexes_match_model(self, migrated_connection):
        inspector = sa.inspect(migrated_connection)
        migrated = {index["name"] for index in inspector.get_indexes("posts")}

        assert migrated == {index.name for index in Post.__table__.indexes}

    def test_likes_count_defaults_to_zero(self, migrated_connection):
        migrated_connection.execute(
            sa.text(
                "INSERT INTO posts (id, title, content, author_id, author_name, created_at) "
                "VALUES ('p1', 't', 'c', 'u1', 'n', '2026-01-01 00:00:00')"
            )
        )

        likes = migrated_connection.execute(sa.text("SELECT likes_count FROM posts")).scalar_one()

        assert likes == 0
