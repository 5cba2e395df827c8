"""Protocol for daily statistics persistence."""

from datetime import date
from typing import Protocol

from spacerep.application.learning.use_cases.dtos.statistics_dtos import DailyStatistics
from spacerep.domain.common.value_objects.ids import UserId


class StatisticsRepositoryProtocol(Protocol):
    def refresh_day(self, user_id: UserId, day: date) -> DailyStatistics:
        """
        Recompute and store the statistics row for ``day`` from its reviews.

        Returns:
            The stored statistics for that day
        """
        ...

    def find_day(self, user_id: UserId, day: date) -> DailyStatistics | None: ...

    def find_range(self, user_id: UserId, start: date, end: date) -> list[DailyStatistics]:
        """Stored rows with ``start <= day <= end``, oldest first."""
        ...
