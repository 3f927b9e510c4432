"""Ports for loading and persisting customers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from custsync.domain.model import CompanyNumber, Customer, ExternalId, ShoppingList

if TYPE_CHECKING:
    from custsync.domain.matching import MatchResult


@runtime_checkable
class CustomerDataAccess(Protocol):
    """Collaborator the synchronization core reads from and writes through."""

    def lookup_company(self, external_id: ExternalId, company_number: CompanyNumber) -> MatchResult:
        """Find a company by external id or, failing that, by company number."""
        ...

    def lookup_person(self, external_id: ExternalId) -> MatchResult:
        """Find a person by external id."""
        ...

    def create_customer(self, customer: Customer) -> Customer:
        """Store a new customer and return it with its internal id assigned."""
        ...

    def update_customer(self, customer: Customer) -> Customer: ...

    def relink_shopping_list(self, customer: Customer, shopping_list: ShoppingList) -> None: ...


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class CustomerRepository(Repository[Customer], Protocol):
    """Persistence contract for customers."""

    def find_by_external_id(self, external_id: ExternalId) -> Customer | None: ...

    def find_by_master_external_id(self, external_id: ExternalId) -> Customer | None: ...

    def find_by_company_number(self, company_number: CompanyNumber) -> Customer | None: ...

    def update(self, entity: Customer) -> None: ...


@runtime_checkable
class ShoppingListRepository(Protocol):
    """Persistence contract for shopping lists."""

    def save(self, shopping_list: ShoppingList) -> None: ...
