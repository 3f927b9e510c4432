"""Entry point for synchronizing one external customer."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from custsync.domain.customer_sync.orchestrator import SyncPipeline
from custsync.domain.customer_sync.state import SyncContext, SyncState
from custsync.domain.customer_sync.variants import select_variant
from custsync.domain.matching import CustomerMatcher, MatchResult

if TYPE_CHECKING:
    from custsync.domain.conflicts import Conflict
    from custsync.domain.matching import MatchOutcome
    from custsync.domain.model import Customer, ExternalCustomer, MatchTerm
    from custsync.domain.ports.persistence import CustomerDataAccess

log = getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class SyncCompleted:
    """Successful synchronization; ``created`` refers to the primary customer only."""

    created: bool
    customer: Customer
    match_term: MatchTerm | None = None
    status: Literal["completed"] = "completed"


type SyncResult = SyncCompleted | Conflict


@dataclass(slots=True)
class CustomerSync:
    """Reconcile external customers with stored customers through ``data_access``."""

    data_access: CustomerDataAccess
    pipeline: SyncPipeline = field(default_factory=SyncPipeline)

    @property
    def matcher(self) -> CustomerMatcher:
        return CustomerMatcher(self.data_access)

    def match_company(self, external: ExternalCustomer) -> MatchOutcome:
        return self.matcher.match_company(external)

    def match_person(self, external: ExternalCustomer) -> MatchOutcome:
        return self.matcher.match_person(external)

    def synchronize(self, external: ExternalCustomer) -> SyncResult:
        """Match, then run the pipeline unless matching produced a conflict."""

        variant = select_variant(external)
        outcome = variant.match(self.matcher, external)
        if not isinstance(outcome, MatchResult):
            log.warning("Not synchronizing %s: %s", external.external_id, outcome.message)
            return outcome

        initial = SyncState(external=external, variant=variant, matches=outcome)
        final = self.pipeline.run(initial, context=SyncContext(data_access=self.data_access))
        return SyncCompleted(
            created=final.created,
            customer=final.require_customer(),
            match_term=outcome.match_term,
        )

    def synchronize_or_raise(self, external: ExternalCustomer) -> SyncCompleted:
        result = self.synchronize(external)
        if isinstance(result, SyncCompleted):
            return result
        raise result.as_error()
