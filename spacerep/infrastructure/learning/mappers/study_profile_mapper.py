"""Mapper between the users row and the StudyProfile entity."""

from spacerep.config import get_settings
from spacerep.domain.common.value_objects import UserId
from spacerep.domain.learning.entities.study_profile import StudyProfile
from spacerep.models import User as UserORM
from spacerep.utils import ensure_utc_or_none


class StudyProfileMapper:
    """
    Study counters are columns of ``users``; the daily limits are stored in
    its ``preferences`` JSON and fall back to the configured defaults.
    """

    def to_domain(self, orm_model: UserORM) -> StudyProfile:
        settings = get_settings()
        preferences = orm_model.preferences or {}
        return StudyProfile(
            user_id=UserId(orm_model.id),
            total_reviews=orm_model.total_reviews,
            current_streak=orm_model.current_streak,
            longest_streak=orm_model.longest_streak,
            last_review_date=ensure_utc_or_none(orm_model.last_review_date),
            total_study_time_seconds=orm_model.total_study_time_seconds,
            daily_new_cards=preferences.get("daily_new_cards", settings.DEFAULT_DAILY_NEW_CARDS),
            daily_review_limit=preferences.get(
                "daily_review_limit", settings.DEFAULT_DAILY_REVIEW_LIMIT
            ),
        )

    def to_orm(self, domain_entity: StudyProfile, orm_model: UserORM) -> UserORM:
        orm_model.total_reviews = domain_entity.total_reviews
        orm_model.current_streak = domain_entity.current_streak
        orm_model.longest_streak = domain_entity.longest_streak
        orm_model.last_review_date = domain_entity.last_review_date
        orm_model.total_study_time_seconds = domain_entity.total_study_time_seconds
        orm_model.preferences = {
            **(orm_model.preferences or {}),
            "daily_new_cards": domain_entity.daily_new_cards,
            "daily_review_limit": domain_entity.daily_review_limit,
        }
        return orm_model
