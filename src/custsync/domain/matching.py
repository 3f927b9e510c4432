"""Match external customers against stored customers.

The data-access collaborator performs the raw lookups and reports which rule
hit. The matcher applies the variant rules on top:

* a stored record must carry the same customer type as the incoming variant;
* a company found by external id but registered under another company number is
  demoted to a duplicate and a fresh primary record is created instead;
* a company found by company number must not already belong to another
  external identity. It adopts the incoming external id and an empty duplicate
  slot is registered for it.

Matching never writes. Conflicts are returned before any persistence runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from custsync.domain.conflicts import IdentityConflict, TypeConflict
from custsync.domain.model import Customer, CustomerType, MatchTerm

if TYPE_CHECKING:
    from custsync.domain.conflicts import Conflict
    from custsync.domain.model import ExternalCustomer
    from custsync.domain.ports.persistence import CustomerDataAccess

log = getLogger(__name__)


@dataclass(slots=True)
class MatchResult:
    """Primary customer (if any), duplicate slots and the rule that matched.

    A ``None`` duplicate slot means a new duplicate record must be created.
    """

    customer: Customer | None = None
    duplicates: list[Customer | None] = field(default_factory=list["Customer | None"])
    match_term: MatchTerm | None = None

    def add_duplicate(self, duplicate: Customer | None) -> None:
        self.duplicates.append(duplicate)

    def clear_primary(self) -> None:
        self.customer = None
        self.match_term = None


type MatchOutcome = MatchResult | Conflict


@dataclass(slots=True)
class CustomerMatcher:
    data_access: CustomerDataAccess

    def match_company(self, external: ExternalCustomer) -> MatchOutcome:
        """Match a company record. Raises ``ValueError`` without a company number."""
        external_id = external.external_id
        company_number = external.company_number
        if company_number is None:
            raise ValueError("company matching requires a company number")

        matches = self.data_access.lookup_company(external_id, company_number)
        customer = matches.customer
        if customer is None:
            return matches

        if customer.customer_type != CustomerType.COMPANY:
            return TypeConflict(
                external_id=external_id,
                expected=CustomerType.COMPANY,
                found=customer.customer_type,
            )

        if matches.match_term is MatchTerm.EXTERNAL_ID:
            if customer.company_number != company_number:
                log.info(
                    "Demoting customer %s: company number %s differs from %s",
                    customer.internal_id,
                    customer.company_number,
                    company_number,
                )
                customer.demote()
                matches.add_duplicate(customer)
                matches.clear_primary()
        elif matches.match_term is MatchTerm.COMPANY_NUMBER:
            stored_external_id = customer.external_id
            if stored_external_id is not None and stored_external_id != external_id:
                return IdentityConflict(
                    company_number=company_number,
                    external_id=external_id,
                    found_external_id=stored_external_id,
                )
            customer.adopt_external_id(external_id)
            # TODO: decide what the registered duplicate should carry besides the name.
            matches.add_duplicate(None)

        return matches

    def match_person(self, external: ExternalCustomer) -> MatchOutcome:
        external_id = external.external_id
        matches = self.data_access.lookup_person(external_id)
        customer = matches.customer
        if customer is not None and customer.customer_type != CustomerType.PERSON:
            return TypeConflict(
                external_id=external_id,
                expected=CustomerType.PERSON,
                found=customer.customer_type,
            )
        return matches
