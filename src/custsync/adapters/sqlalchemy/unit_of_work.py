"""SQLAlchemy-backed unit of work for customer synchronization.

The adapter keeps one engine per process. ``startup()`` maps the domain
classes, creates missing tables and binds a session factory; every
``SqlAlchemyCustomerUnitOfWork`` then opens its own session from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from custsync.adapters.sqlalchemy.mappings import create_all_tables, start_mappers
from custsync.adapters.sqlalchemy.repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyShoppingListRepository,
)
from custsync.config import get_database_config
from custsync.domain.ports.unit_of_work import CustomerRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the adapter or a unit of work is used in the wrong lifecycle state."""


@dataclass(slots=True)
class _AdapterState:
    engine: Engine | None = None
    session_factory: sessionmaker[Session] | None = None

    def require_session_factory(self) -> sessionmaker[Session]:
        if self.session_factory is None:
            raise StartupError(
                "SQLAlchemy adapter not initialised. Call custsync.adapters.sqlalchemy."
                "unit_of_work.startup() before requesting a unit of work."
            )
        return self.session_factory


_STATE = _AdapterState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Bind the adapter to ``engine`` (or a new one for ``database_uri``)."""

    if _STATE.engine is not None and not force:
        raise StartupError(
            "SQLAlchemy adapter already initialised. Pass force=True to reconfigure."
        )

    bound = engine or create_engine(database_uri or get_database_config().uri, future=True)
    start_mappers()
    create_all_tables(bound)
    _STATE.engine = bound
    _STATE.session_factory = sessionmaker(bind=bound, expire_on_commit=False)
    log.debug("SQLAlchemy adapter bound to %s", bound.url)


def is_started() -> bool:
    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the engine and forget the session factory."""

    if _STATE.engine is not None:
        _STATE.engine.dispose()
    _STATE.engine = None
    _STATE.session_factory = None


class SqlAlchemyCustomerUnitOfWork:
    """One session holding the customer and shopping-list repositories.

    Leaving the ``with`` block closes the session; an exception rolls back first.
    Nothing is committed unless ``commit()`` is called.
    """

    def __init__(self) -> None:
        self._session_factory = _STATE.require_session_factory()
        self._session: Session | None = None
        self._repositories: CustomerRepositories | None = None

    def __enter__(self) -> SqlAlchemyCustomerUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work session already initialised")
        session = self._session_factory()
        self._session = session
        self._repositories = CustomerRepositories(
            customers=SqlAlchemyCustomerRepository(session),
            shopping_lists=SqlAlchemyShoppingListRepository(session),
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        if exc_type is not None:
            session.rollback()
        session.close()
        self._session = None
        self._repositories = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._session

    @property
    def repositories(self) -> CustomerRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work session not initialised")
        return self._repositories

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


if TYPE_CHECKING:
    from custsync.domain.ports.unit_of_work import CustomerUnitOfWork

    _uow_check: CustomerUnitOfWork = SqlAlchemyCustomerUnitOfWork()
