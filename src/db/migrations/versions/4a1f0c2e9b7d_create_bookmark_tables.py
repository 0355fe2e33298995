"""
Create bookmark, page_selector, bookmark_page and bookmark_tag tables.

Revision ID: 4a1f0c2e9b7d
Revises:
Create Date: 2024-01-01 00:00:00.000000

"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = '4a1f0c2e9b7d'
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'bookmark',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_table(
        'page_selector',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('scope', sa.Text(), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('selector_index', 'page_selector', ['scope', 'value'], unique=True)
    op.create_table(
        'bookmark_page',
        sa.Column('page_id', sa.Integer(), nullable=False),
        sa.Column('bookmark_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(['bookmark_id'], ['bookmark.id']),
        sa.ForeignKeyConstraint(['page_id'], ['page_selector.id']),
        sa.PrimaryKeyConstraint('page_id', 'bookmark_id'),
    )
    op.create_table(
        'bookmark_tag',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('bookmark_id', sa.Integer(), nullable=False),
        sa.Column('tag', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('tag_index', 'bookmark_tag', ['bookmark_id', 'tag'], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('tag_index', table_name='bookmark_tag')
    op.drop_table('bookmark_tag')
    op.drop_table('bookmark_page')
    op.drop_index('selector_index', table_name='page_selector')
    op.drop_table('page_selector')
    op.drop_table('bookmark')
