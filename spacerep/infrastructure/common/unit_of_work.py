"""SQLAlchemy implementation of the Unit of Work port."""

from sqlalchemy.orm import Session

from spacerep.application.common.unit_of_work import UnitOfWork

_ACTIVE_KEY = "unit_of_work_active"


def commit_or_flush(db: Session) -> None:
    """
    Commit the session, or only flush it while a unit of work is open.

    Repositories call this instead of ``db.commit()`` so that a use case can
    group several saves into a single transaction.
    """
    if db.info.get(_ACTIVE_KEY):
        db.flush()
    else:
        db.commit()


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work bound to the request-scoped session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def begin(self) -> None:
        self.db.info[_ACTIVE_KEY] = True

    def end(self) -> None:
        self.db.info.pop(_ACTIVE_KEY, None)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
