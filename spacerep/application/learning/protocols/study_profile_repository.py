from typing import Protocol

from spacerep.domain.common.value_objects.ids import UserId
from spacerep.domain.learning.entities.study_profile import StudyProfile


class StudyProfileRepositoryProtocol(Protocol):
    def get(self, user_id: UserId) -> StudyProfile: ...

    def get_for_update(self, user_id: UserId) -> StudyProfile: ...

    def save(self, profile: StudyProfile) -> StudyProfile: ...
