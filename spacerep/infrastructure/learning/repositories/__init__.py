from .card_repository import CardRepository
from .deck_repository import DeckRepository
from .optimal_factor_repository import OptimalFactorRepository
from .review_repository import ReviewRepository
from .statistics_repository import StatisticsRepository
from .study_profile_repository import StudyProfileRepository

__all__ = [
    "CardRepository",
    "DeckRepository",
    "OptimalFactorRepository",
    "ReviewRepository",
    "StatisticsRepository",
    "StudyProfileRepository",
]
