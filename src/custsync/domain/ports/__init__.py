"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import (
    CustomerDataAccess,
    CustomerRepository,
    Repository,
    ShoppingListRepository,
)
from .unit_of_work import (
    CustomerRepositories,
    CustomerUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "CustomerDataAccess",
    "CustomerRepositories",
    "CustomerRepository",
    "CustomerUnitOfWork",
    "Repository",
    "RepositoryCollection",
    "ShoppingListRepository",
    "UnitOfWork",
]
