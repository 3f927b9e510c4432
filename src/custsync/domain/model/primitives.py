"""Domain primitives: scalar aliases + small value objects."""

from __future__ import annotations

from dataclasses import dataclass

type ExternalId = str
type InternalId = str
type CompanyNumber = str
type StoreId = str


@dataclass(frozen=True)
class Address:
    street: str | None = None
    city: str | None = None
    postal_code: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.street is None and self.city is None and self.postal_code is None

    def __composite_values__(self) -> tuple[str | None, str | None, str | None]:
        """For SQLAlchemy composite columns (adapter-side convenience)."""
        return (self.street, self.city, self.postal_code)
