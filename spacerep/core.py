from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from spacerep.application.identity.use_cases.authentication_use_case import AuthenticationUseCase
from spacerep.application.identity.use_cases.delete_user_use_case import DeleteUserUseCase
from spacerep.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from spacerep.application.identity.use_cases.update_user_use_case import UpdateUserUseCase
from spacerep.application.learning.use_cases.card_use_case import CardUseCase
from spacerep.application.learning.use_cases.deck_use_case import DeckUseCase
from spacerep.application.learning.use_cases.generate_flashcards_use_case import (
    GenerateFlashcardsUseCase,
)
from spacerep.application.learning.use_cases.statistics_use_case import StatisticsUseCase
from spacerep.application.learning.use_cases.study_use_case import StudyUseCase
from spacerep.config import get_settings
from spacerep.infrastructure.ai.ai_service import AIService
from spacerep.infrastructure.common.unit_of_work import SqlAlchemyUnitOfWork
from spacerep.infrastructure.identity.repositories.user_repository import UserRepository
from spacerep.infrastructure.identity.services.password_service_adapter import (
    PasswordServiceAdapter,
)
from spacerep.infrastructure.identity.services.token_service_adapter import TokenServiceAdapter
from spacerep.infrastructure.learning.repositories import (
    CardRepository,
    DeckRepository,
    OptimalFactorRepository,
    ReviewRepository,
    StatisticsRepository,
    StudyProfileRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Callable(get_settings)

    unit_of_work = providers.Factory(SqlAlchemyUnitOfWork, db=db)

    # Identity repositories and services
    user_repository = providers.Factory(UserRepository, db=db)
    password_service = providers.Singleton(PasswordServiceAdapter)
    token_service = providers.Singleton(TokenServiceAdapter)

    # Learning repositories
    deck_repository = providers.Factory(DeckRepository, db=db)
    card_repository = providers.Factory(CardRepository, db=db)
    review_repository = providers.Factory(ReviewRepository, db=db)
    optimal_factor_repository = providers.Factory(OptimalFactorRepository, db=db)
    study_profile_repository = providers.Factory(StudyProfileRepository, db=db)
    statistics_repository = providers.Factory(StatisticsRepository, db=db)

    ai_flashcard_service = providers.Singleton(AIService)

    # Identity module, application use cases
    authentication_use_case = providers.Factory(
        AuthenticationUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )
    update_user_use_case = providers.Factory(
        UpdateUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
    )
    delete_user_use_case = providers.Factory(
        DeleteUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
    )

    # Learning module, application use cases
    deck_use_case = providers.Factory(
        DeckUseCase,
        deck_repository=deck_repository,
    )
    card_use_case = providers.Factory(
        CardUseCase,
        card_repository=card_repository,
        deck_repository=deck_repository,
    )
    study_use_case = providers.Factory(
        StudyUseCase,
        unit_of_work=unit_of_work,
        card_repository=card_repository,
        deck_repository=deck_repository,
        review_repository=review_repository,
        optimal_factor_repository=optimal_factor_repository,
        study_profile_repository=study_profile_repository,
        statistics_repository=statistics_repository,
    )
    statistics_use_case = providers.Factory(
        StatisticsUseCase,
        card_repository=card_repository,
        deck_repository=deck_repository,
        study_profile_repository=study_profile_repository,
        statistics_repository=statistics_repository,
    )
    generate_flashcards_use_case = providers.Factory(
        GenerateFlashcardsUseCase,
        ai_flashcard_service=ai_flashcard_service,
        max_text_length=settings.provided.MAX_GENERATION_TEXT_LENGTH,
    )


container = Container()
