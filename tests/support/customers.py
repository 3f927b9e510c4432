"""Builders and in-memory collaborators for customer synchronization tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import TYPE_CHECKING

from custsync.domain.matching import MatchResult
from custsync.domain.model import (
    Address,
    Customer,
    CustomerType,
    ExternalCustomer,
    ShoppingList,
)
from custsync.domain.ports.unit_of_work import CustomerRepositories

if TYPE_CHECKING:
    from collections.abc import Callable

LOOKUPS = frozenset({"lookup_company", "lookup_person"})


def make_address() -> Address:
    return Address(street="Main Street 1", city="Gothenburg", postal_code="41101")


def external_company(
    external_id: str = "E1",
    company_number: str = "C1",
    *,
    name: str = "Acme",
    shopping_lists: tuple[ShoppingList, ...] = (),
) -> ExternalCustomer:
    return ExternalCustomer(
        external_id=external_id,
        is_company=True,
        company_number=company_number,
        name=name,
        postal_address=make_address(),
        preferred_store="Nordstan",
        shopping_lists=shopping_lists,
    )


def external_person(
    external_id: str = "P1",
    *,
    name: str = "Ada Lovelace",
    bonus_points: int = 42,
    shopping_lists: tuple[ShoppingList, ...] = (),
) -> ExternalCustomer:
    return ExternalCustomer(
        external_id=external_id,
        is_company=False,
        name=name,
        postal_address=make_address(),
        preferred_store="Kungsbacka",
        bonus_points=bonus_points,
        shopping_lists=shopping_lists,
    )


def stored_customer(
    internal_id: str,
    *,
    customer_type: CustomerType,
    external_id: str | None = None,
    master_external_id: str | None = None,
    company_number: str | None = None,
    name: str | None = "Stored",
) -> Customer:
    return Customer(
        internal_id=internal_id,
        external_id=external_id,
        master_external_id=master_external_id,
        customer_type=customer_type,
        company_number=company_number,
        name=name,
    )


@dataclass
class RecordingDataAccess:
    """Data access stub returning canned lookups and recording every call."""

    company_result: MatchResult = field(default_factory=MatchResult)
    person_result: MatchResult = field(default_factory=MatchResult)
    calls: list[tuple[str, object]] = field(default_factory=list[tuple[str, object]])
    _ids: count[int] = field(default_factory=lambda: count(1))

    def lookup_company(self, external_id: str, company_number: str) -> MatchResult:
        self.calls.append(("lookup_company", (external_id, company_number)))
        return self.company_result

    def lookup_person(self, external_id: str) -> MatchResult:
        self.calls.append(("lookup_person", external_id))
        return self.person_result

    def create_customer(self, customer: Customer) -> Customer:
        self.calls.append(("create_customer", customer))
        customer.internal_id = f"new-{next(self._ids)}"
        return customer

    def update_customer(self, customer: Customer) -> Customer:
        self.calls.append(("update_customer", customer))
        return customer

    def relink_shopping_list(self, customer: Customer, shopping_list: ShoppingList) -> None:
        self.calls.append(("relink_shopping_list", (customer, shopping_list)))

    @property
    def write_calls(self) -> list[tuple[str, object]]:
        return [call for call in self.calls if call[0] not in LOOKUPS]

    def customers_passed_to(self, method: str) -> list[Customer]:
        return [arg for name, arg in self.calls if name == method and isinstance(arg, Customer)]


@dataclass
class InMemoryCustomerRepository:
    customers: list[Customer] = field(default_factory=list[Customer])
    updates: list[Customer] = field(default_factory=list[Customer])

    def add(self, entity: Customer) -> None:
        self.customers.append(entity)

    def update(self, entity: Customer) -> None:
        self.updates.append(entity)

    def find_by_external_id(self, external_id: str) -> Customer | None:
        candidates = [c for c in self.customers if c.external_id == external_id]
        return _best(candidates, lambda c: c.master_external_id != external_id)

    def find_by_master_external_id(self, external_id: str) -> Customer | None:
        return _best([c for c in self.customers if c.master_external_id == external_id])

    def find_by_company_number(self, company_number: str) -> Customer | None:
        candidates = [c for c in self.customers if c.company_number == company_number]
        return _best(candidates, lambda c: c.master_external_id is None)


def _best(
    candidates: list[Customer],
    demoted: Callable[[Customer], bool] = lambda _: False,
) -> Customer | None:
    """Mirror the SQL finders: preferred rows first, then typed rows, then internal id."""
    ranked = sorted(
        candidates,
        key=lambda c: (demoted(c), c.customer_type is None, c.internal_id or ""),
    )
    return ranked[0] if ranked else None


@dataclass
class InMemoryShoppingListRepository:
    lists: dict[str, ShoppingList] = field(default_factory=dict[str, ShoppingList])

    def save(self, shopping_list: ShoppingList) -> None:
        self.lists[shopping_list.list_id] = shopping_list


def in_memory_repositories(*customers: Customer) -> CustomerRepositories:
    return CustomerRepositories(
        customers=InMemoryCustomerRepository(customers=list(customers)),
        shopping_lists=InMemoryShoppingListRepository(),
    )
