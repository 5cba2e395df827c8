"""Pydantic schemas for statistics endpoints."""

import datetime

from pydantic import BaseModel, Field


class StatisticsSummaryResponse(BaseModel):
    total_cards: int
    new_cards: int
    due_cards: int
    mastered_cards: int
    struggling_cards: int
    average_a_factor: float | None
    total_reviews: int
    current_streak: int
    longest_streak: int
    total_study_time_minutes: int
    reviews_today: int
    accuracy_today: float


class DailyStatisticsItem(BaseModel):
    date: datetime.date
    reviews_completed: int
    new_cards_learned: int
    study_time_minutes: int
    average_response_time_ms: int | None
    accuracy_rate: float
    retention_rate: float
    grade_counts: dict[int, int] = Field(..., description="Reviews per grade 1..5")


class DailyStatisticsResponse(BaseModel):
    days: list[DailyStatisticsItem] = Field(..., description="One entry per day, oldest first")


class DeckDistributionItem(BaseModel):
    deck_id: int
    title: str
    card_count: int


class DeckDistributionResponse(BaseModel):
    decks: list[DeckDistributionItem]


class ForecastItem(BaseModel):
    date: datetime.date
    due_count: int


class ForecastResponse(BaseModel):
    forecast: list[ForecastItem] = Field(..., description="Cards due per day, starting today")
