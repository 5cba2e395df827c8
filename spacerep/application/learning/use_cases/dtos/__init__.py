"""DTOs for learning use cases."""

from spacerep.application.learning.use_cases.dtos.card_dtos import (
    CardContent,
    DeleteAllCardsResult,
    ReviewOutcome,
    StudyQueue,
)
from spacerep.application.learning.use_cases.dtos.deck_dtos import DeckCardCounts, DeckWithCounts
from spacerep.application.learning.use_cases.dtos.flashcard_ai_dtos import FlashcardSuggestion
from spacerep.application.learning.use_cases.dtos.statistics_dtos import (
    CardCounts,
    DailyStatistics,
    DeckDistributionEntry,
    ForecastDay,
    StatisticsSummary,
)

__all__ = [
    "CardContent",
    "CardCounts",
    "DailyStatistics",
    "DeckCardCounts",
    "DeckDistributionEntry",
    "DeckWithCounts",
    "DeleteAllCardsResult",
    "FlashcardSuggestion",
    "ForecastDay",
    "ReviewOutcome",
    "StatisticsSummary",
    "StudyQueue",
]
