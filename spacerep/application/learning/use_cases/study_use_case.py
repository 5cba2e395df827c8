"""Use case for studying: the review queue and grading cards."""

import structlog

from spacerep.application.common.unit_of_work import UnitOfWork
from spacerep.application.learning.protocols.card_repository import CardRepositoryProtocol
from spacerep.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from spacerep.application.learning.protocols.optimal_factor_repository import (
    OptimalFactorRepositoryProtocol,
)
from spacerep.application.learning.protocols.review_repository import ReviewRepositoryProtocol
from spacerep.application.learning.protocols.statistics_repository import (
    StatisticsRepositoryProtocol,
)
from spacerep.application.learning.protocols.study_profile_repository import (
    StudyProfileRepositoryProtocol,
)
from spacerep.application.learning.use_cases.dtos.card_dtos import ReviewOutcome, StudyQueue
from spacerep.application.learning.use_cases.exceptions import CardNotFoundError
from spacerep.domain.common.value_objects.ids import CardId, DeckId, UserId
from spacerep.domain.learning.entities.card import Card
from spacerep.domain.learning.entities.optimal_factor import OptimalFactor
from spacerep.domain.learning.entities.review import Review
from spacerep.domain.learning.entities.study_profile import StudyProfile
from spacerep.domain.learning.services.scheduler import Scheduler
from spacerep.domain.learning.value_objects.scheduling import Grade, ScheduleResult
from spacerep.exceptions import DeckNotFoundError, ValidationError
from spacerep.utils import utc_now

logger = structlog.get_logger(__name__)

MAX_QUEUE_SIZE = 200


class StudyUseCase:
    """Build study sessions and record reviews."""

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        card_repository: CardRepositoryProtocol,
        deck_repository: DeckRepositoryProtocol,
        review_repository: ReviewRepositoryProtocol,
        optimal_factor_repository: OptimalFactorRepositoryProtocol,
        study_profile_repository: StudyProfileRepositoryProtocol,
        statistics_repository: StatisticsRepositoryProtocol,
    ) -> None:
        self.unit_of_work = unit_of_work
        self.card_repository = card_repository
        self.deck_repository = deck_repository
        self.review_repository = review_repository
        self.optimal_factor_repository = optimal_factor_repository
        self.study_profile_repository = study_profile_repository
        self.statistics_repository = statistics_repository

    def get_study_queue(
        self, user_id: int, deck_id: int | None = None, limit: int = 20
    ) -> StudyQueue:
        """
        Cards to study now.

        Due reviews come first (most overdue first), then new cards (oldest
        first). Each group is limited by what is left of the user's daily
        allowance, and the whole queue by ``limit``.

        Raises:
            ValidationError: If limit is outside 1..MAX_QUEUE_SIZE
            DeckNotFoundError: If deck_id is given and the deck does not exist
        """
        if not 1 <= limit <= MAX_QUEUE_SIZE:
            raise ValidationError(f"limit must be between 1 and {MAX_QUEUE_SIZE}")

        user_id_vo = UserId(user_id)
        deck_id_vo = None
        if deck_id is not None:
            deck = self.deck_repository.find_by_id(DeckId(deck_id), user_id_vo)
            if not deck:
                raise DeckNotFoundError(deck_id)
            deck_id_vo = deck.id

        now = utc_now()
        profile = self.study_profile_repository.get(user_id_vo)
        today = self.statistics_repository.find_day(user_id_vo, now.date())
        reviews_done = today.reviews_completed if today else 0
        new_done = today.new_cards_learned if today else 0

        reviews_remaining = max(profile.daily_review_limit - reviews_done, 0)
        new_remaining = max(profile.daily_new_cards - new_done, 0)

        review_cards: list[Card] = []
        review_slots = min(reviews_remaining, limit)
        if review_slots:
            review_cards = self.card_repository.find_due_reviews(
                user_id_vo, now, review_slots, deck_id_vo
            )

        new_cards: list[Card] = []
        new_slots = min(new_remaining, limit - len(review_cards))
        if new_slots:
            new_cards = self.card_repository.find_new(user_id_vo, new_slots, deck_id_vo)

        return StudyQueue(
            review_cards=review_cards,
            new_cards=new_cards,
            reviews_remaining_today=reviews_remaining,
            new_cards_remaining_today=new_remaining,
        )

    def review_card(
        self,
        card_id: int,
        user_id: int,
        grade: int,
        response_time_ms: int | None = None,
    ) -> ReviewOutcome:
        """
        Grade a card and reschedule it.

        The card, its optimal factor matrix cell, the review record, the study
        profile and today's statistics are written in one transaction. The
        user's row stays locked until it commits, so two reviews by the same
        user never both insert a matrix cell or a daily statistics row.

        Raises:
            CardNotFoundError: If the card does not exist
            ValidationError: If the grade or response time is invalid
        """
        grade_vo = Grade(grade)
        user_id_vo = UserId(user_id)
        now = utc_now()

        with self.unit_of_work:
            profile = self.study_profile_repository.get_for_update(user_id_vo)

            card = self.card_repository.find_by_id(CardId(card_id), user_id_vo)
            if not card:
                raise CardNotFoundError(card_id)

            repetition_number, category = Scheduler.matrix_key(card)
            cell = self.optimal_factor_repository.find(user_id_vo, repetition_number, category)

            result = Scheduler.schedule(
                card, grade_vo, now, cell.optimal_factor if cell else None
            )
            review = Review.from_schedule(card.id, user_id_vo, result, response_time_ms)
            card.apply_review(result)

            if result.matrix_update is not None:
                cell = self._update_matrix(user_id_vo, cell, result)
                card.record_matrix_update(
                    repetition_number=cell.repetition_number,
                    difficulty_category=cell.difficulty_category,
                    optimal_factor=cell.optimal_factor,
                    usage_count=cell.usage_count,
                    updated_at=now,
                )

            card = self.card_repository.save(card)
            review = self.review_repository.save(review)

            profile.record_review(now, response_time_ms)
            self.study_profile_repository.save(profile)

            self.statistics_repository.refresh_day(user_id_vo, now.date())

            self.unit_of_work.commit()

        logger.info(
            "card_reviewed",
            card_id=card_id,
            grade=grade,
            interval_days=card.interval_days,
            a_factor=card.a_factor,
        )
        return ReviewOutcome(card=card, review=review)

    def _update_matrix(
        self, user_id: UserId, cell: OptimalFactor | None, result: ScheduleResult
    ) -> OptimalFactor:
        update = result.matrix_update
        assert update is not None

        if cell is None:
            cell = OptimalFactor.create(
                user_id=user_id,
                repetition_number=update.repetition_number,
                difficulty_category=update.difficulty_category,
                optimal_factor=update.target_factor,
                now=result.reviewed_at,
            )
        else:
            cell.blend(update.target_factor, result.reviewed_at)
        return self.optimal_factor_repository.save(cell)

    def get_card_reviews(self, card_id: int, user_id: int) -> list[Review]:
        """
        Review history of a card, newest first.

        Raises:
            CardNotFoundError: If the card does not exist
        """
        user_id_vo = UserId(user_id)
        card = self.card_repository.find_by_id(CardId(card_id), user_id_vo)
        if not card:
            raise CardNotFoundError(card_id)
        return self.review_repository.find_by_card(card.id, user_id_vo)

    def get_profile(self, user_id: int) -> StudyProfile:
        return self.study_profile_repository.get(UserId(user_id))

    def update_preferences(
        self,
        user_id: int,
        daily_new_cards: int | None = None,
        daily_review_limit: int | None = None,
    ) -> StudyProfile:
        """
        Change the daily study allowances.

        Raises:
            ValidationError: If nothing was provided or a value is out of range
        """
        if daily_new_cards is None and daily_review_limit is None:
            raise ValidationError(
                "At least one of daily_new_cards or daily_review_limit must be provided"
            )

        profile = self.study_profile_repository.get(UserId(user_id))
        profile.update_preferences(daily_new_cards, daily_review_limit)
        profile = self.study_profile_repository.save(profile)

        logger.info(
            "study_preferences_updated",
            user_id=user_id,
            daily_new_cards=profile.daily_new_cards,
            daily_review_limit=profile.daily_review_limit,
        )
        return profile
