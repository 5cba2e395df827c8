"""Database models."""

from datetime import date, datetime
from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from spacerep.database import Base


class User(Base):
    """User account with study counters and preferences."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    hashed_password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    preferences: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    total_reviews: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    current_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    longest_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_review_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    total_study_time_seconds: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    decks: Mapped[list["Deck"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, email='{self.email}')>"


class Deck(Base):
    """Named collection of cards owned by a user."""

    __tablename__ = "decks"
    __table_args__ = (UniqueConstraint("user_id", "title", name="uq_deck_user_title"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    user: Mapped[User] = relationship(back_populates="decks")
    cards: Mapped[list["Card"]] = relationship(
        back_populates="deck", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        """String representation of Deck."""
        return f"<Deck(id={self.id}, title='{self.title}')>"


class Card(Base):
    """Flashcard with its spaced-repetition scheduling state."""

    __tablename__ = "cards"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    deck_id: Mapped[int] = mapped_column(
        ForeignKey("decks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    front_content: Mapped[str] = mapped_column(Text, nullable=False)
    back_content: Mapped[str] = mapped_column(Text, nullable=False)
    source_type: Mapped[str] = mapped_column(String(20), nullable=False, default="manual")
    a_factor: Mapped[float] = mapped_column(Float, nullable=False, default=2.5)
    repetition_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    interval_days: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    lapses_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    next_review_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    last_reviewed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    review_history: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list
    )
    of_matrix_updates: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    deck: Mapped[Deck] = relationship(back_populates="cards")
    reviews: Mapped[list["Review"]] = relationship(
        back_populates="card", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        """String representation of Card."""
        return f"<Card(id={self.id}, deck_id={self.deck_id}, front='{self.front_content[:50]}')>"


class Review(Base):
    """Single graded recall of a card."""

    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    card_id: Mapped[int] = mapped_column(
        ForeignKey("cards.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    review_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    grade: Mapped[int] = mapped_column(Integer, nullable=False)
    response_time_ms: Mapped[int | None] = mapped_column(Integer, nullable=True)
    previous_interval: Mapped[int | None] = mapped_column(Integer, nullable=True)
    new_interval: Mapped[int] = mapped_column(Integer, nullable=False)
    a_factor_before: Mapped[float] = mapped_column(Float, nullable=False)
    a_factor_after: Mapped[float] = mapped_column(Float, nullable=False)
    optimal_factor_used: Mapped[float | None] = mapped_column(Float, nullable=True)

    card: Mapped[Card] = relationship(back_populates="reviews")

    def __repr__(self) -> str:
        """String representation of Review."""
        return f"<Review(id={self.id}, card_id={self.card_id}, grade={self.grade})>"


class OptimalFactor(Base):
    """One cell of a user's optimal factor matrix."""

    __tablename__ = "of_matrix"
    __table_args__ = (
        UniqueConstraint(
            "user_id",
            "repetition_number",
            "difficulty_category",
            name="uq_of_matrix_user_cell",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    repetition_number: Mapped[int] = mapped_column(Integer, nullable=False)
    difficulty_category: Mapped[int] = mapped_column(Integer, nullable=False)
    optimal_factor: Mapped[float] = mapped_column(Float, nullable=False)
    usage_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of OptimalFactor."""
        return (
            f"<OptimalFactor(user_id={self.user_id}, n={self.repetition_number}, "
            f"category={self.difficulty_category}, of={self.optimal_factor})>"
        )


class UserStatistics(Base):
    """Per-day review statistics for a user."""

    __tablename__ = "user_statistics"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_user_statistics_user_date"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    day: Mapped[date] = mapped_column("date", Date, nullable=False)
    reviews_completed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    new_cards_learned: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    study_time_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    average_response_time_ms: Mapped[int | None] = mapped_column(Integer, nullable=True)
    accuracy_rate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    retention_rate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    cards_mastered: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cards_struggling: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    grade_1_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    grade_2_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    grade_3_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    grade_4_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    grade_5_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        """String representation of UserStatistics."""
        return f"<UserStatistics(user_id={self.user_id}, day={self.day})>"
