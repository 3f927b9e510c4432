"""Customer records as delivered by the upstream source system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from custsync.domain.model.customer import ShoppingList
    from custsync.domain.model.primitives import Address, CompanyNumber, ExternalId, StoreId


@dataclass(frozen=True, kw_only=True)
class ExternalCustomer:
    """Upstream customer record; never mutated during synchronization."""

    external_id: ExternalId
    is_company: bool = False
    company_number: CompanyNumber | None = None
    name: str | None = None
    postal_address: Address | None = None
    preferred_store: StoreId | None = None
    bonus_points: int | None = None
    shopping_lists: tuple[ShoppingList, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.external_id:
            raise ValueError("external customer requires an external id")
        if self.is_company and not self.company_number:
            raise ValueError("external company requires a company number")
