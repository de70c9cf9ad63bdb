"""
Create catalog tables: authors, publishers, books, comments

books.author_id and books.publisher_id are nullable with ON DELETE SET NULL:
removing an author or publisher keeps its books in the catalog.
comments.book_id uses ON DELETE CASCADE: comments go away with their book.

Revision ID: 3f2a9c7d1b10
Revises:
Create Date: 2026-10-17 10:12:44.318204
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


revision: str = "3f2a9c7d1b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Create the four catalog tables and their FK indexes."""
    op.create_table(
        "authors",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column("biography", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_authors"),
    )
    op.create_index("ix_authors_name", "authors", ["name"])

    op.create_table(
        "publishers",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("country", sa.String(length=100), nullable=True),
        sa.Column("website", sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_publishers"),
    )
    op.create_index("ix_publishers_name", "publishers", ["name"])

    op.create_table(
        "books",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("isbn", sa.String(length=17), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("publication_date", sa.Date(), nullable=True),
        sa.Column("pages", sa.Integer(), nullable=True),
        sa.Column("author_id", sa.BigInteger(), nullable=True),
        sa.Column("publisher_id", sa.BigInteger(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_books"),
        sa.ForeignKeyConstraint(
            ["author_id"], ["authors.id"],
            name="fk_books_author_id_authors",
            ondelete="SET NULL",
        ),
        sa.ForeignKeyConstraint(
            ["publisher_id"], ["publishers.id"],
            name="fk_books_publisher_id_publishers",
            ondelete="SET NULL",
        ),
    )
    op.create_index("ix_books_author_id", "books", ["author_id"])
    op.create_index("ix_books_publisher_id", "books", ["publisher_id"])

    op.create_table(
        "comments",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("text", sa.String(length=2000), nullable=False),
        sa.Column("book_id", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_comments"),
        sa.ForeignKeyConstraint(
            ["book_id"], ["books.id"],
            name="fk_comments_book_id_books",
            ondelete="CASCADE",
        ),
    )
    op.create_index("ix_comments_book_id", "comments", ["book_id"])


def downgrade() -> None:
    """Drop catalog tables in reverse dependency order."""
    op.drop_table("comments")
    op.drop_table("books")
    op.drop_table("publishers")
    op.drop_table("authors")
