"""Public domain model surface."""

from __future__ import annotations

from custsync.domain.model.customer import Customer, ShoppingList
from custsync.domain.model.enums import CustomerType, MatchTerm
from custsync.domain.model.external import ExternalCustomer
from custsync.domain.model.primitives import (
    Address,
    CompanyNumber,
    ExternalId,
    InternalId,
    StoreId,
)

__all__ = [
    "Address",
    "CompanyNumber",
    "Customer",
    "CustomerType",
    "ExternalCustomer",
    "ExternalId",
    "InternalId",
    "MatchTerm",
    "ShoppingList",
    "StoreId",
]
