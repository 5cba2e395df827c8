"""Learning context schemas."""

from spacerep.infrastructure.learning.schemas.card_schemas import (
    Card,
    CardBase,
    CardBatchCreateRequest,
    CardCreateRequest,
    CardResponse,
    CardsCreatedResponse,
    CardsDeletedResponse,
    CardsListResponse,
    CardUpdateRequest,
    Review,
    ReviewRequest,
    ReviewResponse,
    ReviewsListResponse,
    card_to_schema,
    review_to_schema,
)
from spacerep.infrastructure.learning.schemas.deck_schemas import (
    Deck,
    DeckCreateRequest,
    DeckResponse,
    DecksListResponse,
    DeckUpdateRequest,
    deck_to_schema,
)
from spacerep.infrastructure.learning.schemas.statistics_schemas import (
    DailyStatisticsItem,
    DailyStatisticsResponse,
    DeckDistributionItem,
    DeckDistributionResponse,
    ForecastItem,
    ForecastResponse,
    StatisticsSummaryResponse,
)
from spacerep.infrastructure.learning.schemas.study_schemas import (
    StudyPreferencesUpdateRequest,
    StudyProfileResponse,
    StudyQueueResponse,
)
from spacerep.infrastructure.learning.schemas.suggestion_schemas import (
    FlashcardSuggestionItem,
    FlashcardSuggestionsRequest,
    FlashcardSuggestionsResponse,
)

__all__ = [
    "Card",
    "CardBase",
    "CardBatchCreateRequest",
    "CardCreateRequest",
    "CardResponse",
    "CardUpdateRequest",
    "CardsCreatedResponse",
    "CardsDeletedResponse",
    "CardsListResponse",
    "DailyStatisticsItem",
    "DailyStatisticsResponse",
    "Deck",
    "DeckCreateRequest",
    "DeckDistributionItem",
    "DeckDistributionResponse",
    "DeckResponse",
    "DeckUpdateRequest",
    "DecksListResponse",
    "FlashcardSuggestionItem",
    "FlashcardSuggestionsRequest",
    "FlashcardSuggestionsResponse",
    "ForecastItem",
    "ForecastResponse",
    "Review",
    "ReviewRequest",
    "ReviewResponse",
    "ReviewsListResponse",
    "StatisticsSummaryResponse",
    "StudyPreferencesUpdateRequest",
    "StudyProfileResponse",
    "StudyQueueResponse",
    "card_to_schema",
    "deck_to_schema",
    "review_to_schema",
]
