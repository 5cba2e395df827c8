"""Initial schema: users, decks, cards, reviews, OF matrix and daily statistics.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create all tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=True),
        sa.Column("preferences", sa.JSON(), nullable=False),
        sa.Column("total_reviews", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("current_streak", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("longest_streak", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_review_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("total_study_time_seconds", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "decks",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "title", name="uq_deck_user_title"),
    )
    op.create_index(op.f("ix_decks_id"), "decks", ["id"], unique=False)
    op.create_index(op.f("ix_decks_user_id"), "decks", ["user_id"], unique=False)

    op.create_table(
        "cards",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("deck_id", sa.Integer(), nullable=False),
        sa.Column("front_content", sa.Text(), nullable=False),
        sa.Column("back_content", sa.Text(), nullable=False),
        sa.Column("source_type", sa.String(20), nullable=False, server_default="manual"),
        sa.Column("a_factor", sa.Float(), nullable=False, server_default="2.5"),
        sa.Column("repetition_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("interval_days", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("lapses_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "next_review_date",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column("last_reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("review_history", sa.JSON(), nullable=False),
        sa.Column("of_matrix_updates", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["deck_id"], ["decks.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_cards_id"), "cards", ["id"], unique=False)
    op.create_index(op.f("ix_cards_user_id"), "cards", ["user_id"], unique=False)
    op.create_index(op.f("ix_cards_deck_id"), "cards", ["deck_id"], unique=False)
    op.create_index(
        op.f("ix_cards_next_review_date"), "cards", ["next_review_date"], unique=False
    )

    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("card_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("review_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("grade", sa.Integer(), nullable=False),
        sa.Column("response_time_ms", sa.Integer(), nullable=True),
        sa.Column("previous_interval", sa.Integer(), nullable=True),
        sa.Column("new_interval", sa.Integer(), nullable=False),
        sa.Column("a_factor_before", sa.Float(), nullable=False),
        sa.Column("a_factor_after", sa.Float(), nullable=False),
        sa.Column("optimal_factor_used", sa.Float(), nullable=True),
        sa.ForeignKeyConstraint(["card_id"], ["cards.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_reviews_id"), "reviews", ["id"], unique=False)
    op.create_index(op.f("ix_reviews_card_id"), "reviews", ["card_id"], unique=False)
    op.create_index(op.f("ix_reviews_user_id"), "reviews", ["user_id"], unique=False)
    op.create_index(op.f("ix_reviews_review_date"), "reviews", ["review_date"], unique=False)

    op.create_table(
        "of_matrix",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("repetition_number", sa.Integer(), nullable=False),
        sa.Column("difficulty_category", sa.Integer(), nullable=False),
        sa.Column("optimal_factor", sa.Float(), nullable=False),
        sa.Column("usage_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "last_updated",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id",
            "repetition_number",
            "difficulty_category",
            name="uq_of_matrix_user_cell",
        ),
    )
    op.create_index(op.f("ix_of_matrix_id"), "of_matrix", ["id"], unique=False)
    op.create_index(op.f("ix_of_matrix_user_id"), "of_matrix", ["user_id"], unique=False)

    op.create_table(
        "user_statistics",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("reviews_completed", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("new_cards_learned", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("study_time_minutes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("average_response_time_ms", sa.Integer(), nullable=True),
        sa.Column("accuracy_rate", sa.Float(), nullable=False, server_default="0"),
        sa.Column("retention_rate", sa.Float(), nullable=False, server_default="0"),
        sa.Column("cards_mastered", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("cards_struggling", sa.Integer(), nullable=False, server_default="0"),
        *[
            sa.Column(f"grade_{grade}_count", sa.Integer(), nullable=False, server_default="0")
            for grade in range(1, 6)
        ],
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "date", name="uq_user_statistics_user_date"),
    )
    op.create_index(op.f("ix_user_statistics_id"), "user_statistics", ["id"], unique=False)
    op.create_index(
        op.f("ix_user_statistics_user_id"), "user_statistics", ["user_id"], unique=False
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("user_statistics")
    op.drop_table("of_matrix")
    op.drop_table("reviews")
    op.drop_table("cards")
    op.drop_table("decks")
    op.drop_table("users")
