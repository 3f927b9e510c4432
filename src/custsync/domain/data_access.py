"""Repository-backed implementation of the ``CustomerDataAccess`` port."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING
from uuid import uuid4

from custsync.domain.matching import MatchResult
from custsync.domain.model import MatchTerm

if TYPE_CHECKING:
    from custsync.domain.model import (
        CompanyNumber,
        Customer,
        ExternalId,
        InternalId,
        ShoppingList,
    )
    from custsync.domain.ports.unit_of_work import CustomerRepositories, CustomerUnitOfWork

log = getLogger(__name__)


def new_internal_id() -> InternalId:
    return uuid4().hex


@dataclass(slots=True)
class RepositoryCustomerDataAccess:
    """Run customer lookups and writes against a repository collection.

    Writes go through the repositories only; committing is left to the unit of
    work that owns them.
    """

    repositories: CustomerRepositories

    @classmethod
    def for_unit_of_work(cls, uow: CustomerUnitOfWork) -> RepositoryCustomerDataAccess:
        return cls(uow.repositories)

    def lookup_company(self, external_id: ExternalId, company_number: CompanyNumber) -> MatchResult:
        customers = self.repositories.customers
        matches = MatchResult()

        by_external_id = customers.find_by_external_id(external_id)
        if by_external_id is not None:
            matches.customer = by_external_id
            matches.match_term = MatchTerm.EXTERNAL_ID
            by_master_id = customers.find_by_master_external_id(external_id)
            if by_master_id is not None and by_master_id.internal_id != by_external_id.internal_id:
                matches.add_duplicate(by_master_id)
            return matches

        by_company_number = customers.find_by_company_number(company_number)
        if by_company_number is not None:
            matches.customer = by_company_number
            matches.match_term = MatchTerm.COMPANY_NUMBER
        return matches

    def lookup_person(self, external_id: ExternalId) -> MatchResult:
        matches = MatchResult()
        by_external_id = self.repositories.customers.find_by_external_id(external_id)
        if by_external_id is not None:
            matches.customer = by_external_id
            matches.match_term = MatchTerm.EXTERNAL_ID
        return matches

    def create_customer(self, customer: Customer) -> Customer:
        if customer.internal_id is None:
            customer.internal_id = new_internal_id()
        self.repositories.customers.add(customer)
        log.debug(
            "Created customer %s (external id %s)", customer.internal_id, customer.external_id
        )
        return customer

    def update_customer(self, customer: Customer) -> Customer:
        self.repositories.customers.update(customer)
        return customer

    def relink_shopping_list(self, customer: Customer, shopping_list: ShoppingList) -> None:
        shopping_list.assign_to(customer)
        self.repositories.shopping_lists.save(shopping_list)


if TYPE_CHECKING:
    from typing import cast

    from custsync.domain.ports.persistence import CustomerDataAccess

    _data_access_check: CustomerDataAccess = RepositoryCustomerDataAccess(
        repositories=cast("CustomerRepositories", object())
    )
