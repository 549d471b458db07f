"""create posts table

Revision ID: 7d3a91c4e2b0
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql


# revision identifiers, used by Alembic.
revision: str = '7d3a91c4e2b0'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _varchar(length: int) -> sa.String:
    return sa.String(length).with_variant(
        mysql.VARCHAR(length, charset='utf8mb4', collation='utf8mb4_unicode_ci'), 'mysql', 'mariadb'
    )


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if not inspector.has_table('posts'):
        op.create_table(
            'posts',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('title', _varchar(255), nullable=False),
            sa.Column(
                'content',
                sa.Text(length=1000).with_variant(
                    mysql.TEXT(1000, charset='utf8mb4', collation='utf8mb4_unicode_ci'), 'mysql', 'mariadb'
                ),
                nullable=False,
            ),
            sa.Column('author_id', sa.String(length=255), nullable=False),
            sa.Column('author_name', _varchar(255), nullable=False),
            sa.Column('author_avatar', sa.String(length=512), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('likes_count', sa.Integer(), server_default=sa.text('0'), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index(op.f('ix_posts_author_id'), 'posts', ['author_id'], unique=False)
        op.create_index(op.f('ix_posts_created_at'), 'posts', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_posts_created_at'), table_name='posts')
    op.drop_index(op.f('ix_posts_author_id'), table_name='posts')
    op.drop_table('posts')
