from .scheduling import (
    INITIAL_A_FACTOR,
    MAX_A_FACTOR,
    MIN_A_FACTOR,
    Grade,
    OptimalFactorUpdate,
    ScheduleResult,
)

__all__ = [
    "INITIAL_A_FACTOR",
    "MAX_A_FACTOR",
    "MIN_A_FACTOR",
    "Grade",
    "OptimalFactorUpdate",
    "ScheduleResult",
]
