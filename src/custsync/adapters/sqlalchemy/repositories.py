"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import case, select

from custsync.adapters.sqlalchemy.mappings import customer_table
from custsync.domain.model import Customer, ShoppingList

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement
    from sqlalchemy.orm import Session

    from custsync.domain.model import CompanyNumber, ExternalId


class SqlAlchemyCustomerRepository:
    """Customer finders returning a single, deterministic row.

    Demotion and duplicate materialisation leave several rows sharing one
    external id. Finders rank candidates so the primary record always wins: rows
    mastered by the requested external id first, then typed rows, then the
    lowest internal id.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Customer) -> None:
        self.session.add(entity)

    def update(self, entity: Customer) -> None:
        # Loaded customers are tracked by the session already.
        if entity not in self.session:
            self.session.merge(entity)

    def find_by_external_id(self, external_id: ExternalId) -> Customer | None:
        return self._first(
            customer_table.c.external_id == external_id,
            case((customer_table.c.master_external_id == external_id, 0), else_=1),
        )

    def find_by_master_external_id(self, external_id: ExternalId) -> Customer | None:
        return self._first(customer_table.c.master_external_id == external_id)

    def find_by_company_number(self, company_number: CompanyNumber) -> Customer | None:
        return self._first(
            customer_table.c.company_number == company_number,
            case((customer_table.c.master_external_id.is_(None), 1), else_=0),
        )

    def _first(
        self,
        criterion: ColumnElement[bool],
        *preferences: ColumnElement[int],
    ) -> Customer | None:
        stmt = (
            select(Customer)
            .where(criterion)
            .order_by(
                *preferences,
                case((customer_table.c.customer_type.is_(None), 1), else_=0),
                customer_table.c.internal_id,
            )
            .limit(1)
        )
        return self.session.execute(stmt).scalars().first()


class SqlAlchemyShoppingListRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def save(self, shopping_list: ShoppingList) -> None:
        self.session.merge(shopping_list)


if TYPE_CHECKING:
    from custsync.domain.ports.persistence import CustomerRepository, ShoppingListRepository

    _session_stub = cast("Session", object())
    _customer_repo: CustomerRepository = SqlAlchemyCustomerRepository(_session_stub)
    _shopping_list_repo: ShoppingListRepository = SqlAlchemyShoppingListRepository(_session_stub)
