"""SQLAlchemy mapping metadata for the customer domain model."""

from __future__ import annotations

import json
import logging
from functools import cache
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import (
    Column,
    Dialect,
    Enum,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    TypeDecorator,
    orm,
)
from sqlalchemy.orm import composite, configure_mappers

from custsync.domain.model import Address, Customer, CustomerType, ShoppingList

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

INTERNAL_ID_LENGTH = 32


class ProductListType(TypeDecorator[list[str]]):
    """Store an ordered product list as a JSON array."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: list[str] | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return json.dumps(list(value))

    def process_result_value(self, value: str | None, dialect: Dialect) -> list[str]:
        _ = dialect
        if value is None:
            return []
        loaded = json.loads(value)
        if not isinstance(loaded, list):
            return []
        items = cast(list[Any], loaded)
        return [str(item) for item in items]


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

customer_table = Table(
    "customer",
    mapper_registry.metadata,
    Column("internal_id", String(INTERNAL_ID_LENGTH), primary_key=True),
    Column("external_id", String, nullable=True, index=True),
    Column("master_external_id", String, nullable=True, index=True),
    Column("customer_type", Enum(CustomerType, native_enum=False), nullable=True),
    Column("company_number", String, nullable=True, index=True),
    Column("name", String, nullable=True),
    Column("street", String, nullable=True),
    Column("city", String, nullable=True),
    Column("postal_code", String, nullable=True),
    Column("preferred_store", String, nullable=True),
    Column("bonus_points", Integer, nullable=True),
)

shopping_list_table = Table(
    "shopping_list",
    mapper_registry.metadata,
    Column("id", String, key="list_id", primary_key=True),
    Column("products", ProductListType, nullable=False),
    Column(
        "customer_id",
        String(INTERNAL_ID_LENGTH),
        ForeignKey("customer.internal_id"),
        nullable=True,
        index=True,
    ),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(
        Customer,
        customer_table,
        properties={
            "address": composite(
                Address,
                customer_table.c.street,
                customer_table.c.city,
                customer_table.c.postal_code,
            ),
        },
    )

    mapper_registry.map_imperatively(ShoppingList, shopping_list_table)

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    mapper_registry.metadata.create_all(engine)
