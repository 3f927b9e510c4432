"""State threaded through the synchronization stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from custsync.domain.customer_sync.variants import CustomerVariant
    from custsync.domain.matching import MatchResult
    from custsync.domain.model import Customer, ExternalCustomer
    from custsync.domain.ports.persistence import CustomerDataAccess


@dataclass(frozen=True, slots=True, kw_only=True)
class SyncState:
    """Snapshot handed from one stage to the next.

    Stages never mutate the state itself; they return a replacement. The customer
    objects it references are mutated in place by the populate and duplicate
    stages.
    """

    external: ExternalCustomer
    variant: CustomerVariant
    matches: MatchResult
    customer: Customer | None = None
    created: bool = False

    def require_customer(self) -> Customer:
        if self.customer is None:
            raise RuntimeError("No customer acquired yet; run acquire_or_create first")
        return self.customer


@dataclass(frozen=True, slots=True)
class SyncContext:
    """Collaborators shared by all stages of one synchronization call."""

    data_access: CustomerDataAccess
