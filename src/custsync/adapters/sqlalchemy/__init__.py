"""SQLAlchemy adapter package for custsync."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import SqlAlchemyCustomerRepository, SqlAlchemyShoppingListRepository
from .unit_of_work import (
    SqlAlchemyCustomerUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyCustomerUnitOfWork",
    "SqlAlchemyShoppingListRepository",
    "StartupError",
    "create_all_tables",
    "is_started",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
