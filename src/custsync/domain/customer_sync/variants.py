"""Person and company flavours of the synchronization pipeline."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from custsync.domain.matching import CustomerMatcher
from custsync.domain.model import CustomerType

if TYPE_CHECKING:
    from custsync.domain.matching import MatchOutcome
    from custsync.domain.model import Customer, ExternalCustomer

type MatchDispatch = Callable[[CustomerMatcher, ExternalCustomer], MatchOutcome]
type FieldOverlay = Callable[[Customer, ExternalCustomer], None]


@dataclass(frozen=True, slots=True)
class CustomerVariant:
    """Everything that differs between person and company synchronization."""

    customer_type: CustomerType
    match: MatchDispatch
    populate_overlay: FieldOverlay


def _populate_person(customer: Customer, external: ExternalCustomer) -> None:
    customer.bonus_points = external.bonus_points


def _populate_company(customer: Customer, external: ExternalCustomer) -> None:
    customer.company_number = external.company_number


PERSON = CustomerVariant(
    customer_type=CustomerType.PERSON,
    match=CustomerMatcher.match_person,
    populate_overlay=_populate_person,
)

COMPANY = CustomerVariant(
    customer_type=CustomerType.COMPANY,
    match=CustomerMatcher.match_company,
    populate_overlay=_populate_company,
)


def select_variant(external: ExternalCustomer) -> CustomerVariant:
    return COMPANY if external.is_company else PERSON
