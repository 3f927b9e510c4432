"""Internal customer records and the shopping lists that point at them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from custsync.domain.model.enums import CustomerType
    from custsync.domain.model.primitives import (
        Address,
        CompanyNumber,
        ExternalId,
        InternalId,
        StoreId,
    )


@dataclass(eq=False, kw_only=True)
class Customer:
    """Internal customer record.

    ``internal_id`` is assigned by the storage layer; a customer without one has
    never been persisted.
    """

    internal_id: InternalId | None = None
    external_id: ExternalId | None = None
    master_external_id: ExternalId | None = None
    customer_type: CustomerType | None = None
    company_number: CompanyNumber | None = None
    name: str | None = None
    address: Address | None = None
    preferred_store: StoreId | None = None
    bonus_points: int | None = None

    @classmethod
    def with_external_id(cls, external_id: ExternalId) -> Customer:
        """Return a new, unpersisted customer mastered by ``external_id``."""
        return cls(external_id=external_id, master_external_id=external_id)

    @property
    def is_persisted(self) -> bool:
        return self.internal_id is not None

    def demote(self) -> None:
        """Drop the master external id so the record no longer counts as primary."""
        self.master_external_id = None

    def adopt_external_id(self, external_id: ExternalId) -> None:
        self.external_id = external_id
        self.master_external_id = external_id


@dataclass(eq=False, kw_only=True)
class ShoppingList:
    """A shopping list owned by at most one customer."""

    list_id: str
    products: list[str] = field(default_factory=list[str])
    customer_id: InternalId | None = None

    def assign_to(self, customer: Customer) -> None:
        if not customer.is_persisted:
            raise ValueError("shopping list owner must be persisted")
        self.customer_id = customer.internal_id
