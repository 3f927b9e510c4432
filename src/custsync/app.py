"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from custsync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCustomerUnitOfWork,
    is_started,
    startup,
)
from custsync.domain.customer_sync import CustomerSync
from custsync.domain.data_access import RepositoryCustomerDataAccess
from custsync.domain.ports.unit_of_work import CustomerUnitOfWork

if TYPE_CHECKING:
    from custsync.domain.customer_sync import SyncCompleted
    from custsync.domain.matching import MatchOutcome
    from custsync.domain.model import ExternalCustomer

UnitOfWorkFactory = Callable[[], CustomerUnitOfWork]


log = getLogger(__name__)


def _default_unit_of_work_factory() -> UnitOfWorkFactory:
    if not is_started():
        startup()
    return SqlAlchemyCustomerUnitOfWork


def sync_external_customer(
    external: ExternalCustomer,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> SyncCompleted:
    """Synchronize one external customer and commit the result.

    Raises ``CustomerConflictError`` when matching detects a conflict; nothing is
    written in that case.
    """

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    log.info(
        "Starting customer sync: external_id=%s, company=%s, shopping_lists=%s",
        external.external_id,
        external.is_company,
        len(external.shopping_lists),
    )

    with effective_uow() as uow:
        sync = CustomerSync(RepositoryCustomerDataAccess.for_unit_of_work(uow))
        result = sync.synchronize_or_raise(external)
        uow.commit()

    log.info(
        "Finished customer sync: external_id=%s, internal_id=%s, created=%s, match_term=%s",
        external.external_id,
        result.customer.internal_id,
        result.created,
        result.match_term,
    )
    return result


def match_external_customer(
    external: ExternalCustomer,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> MatchOutcome:
    """Run only the matching rules for ``external``; nothing is committed."""

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    with effective_uow() as uow:
        sync = CustomerSync(RepositoryCustomerDataAccess.for_unit_of_work(uow))
        if external.is_company:
            return sync.match_company(external)
        return sync.match_person(external)
