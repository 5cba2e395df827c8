from .card_mapper import CardMapper
from .deck_mapper import DeckMapper
from .optimal_factor_mapper import OptimalFactorMapper
from .review_mapper import ReviewMapper
from .study_profile_mapper import StudyProfileMapper

__all__ = [
    "CardMapper",
    "DeckMapper",
    "OptimalFactorMapper",
    "ReviewMapper",
    "StudyProfileMapper",
]
