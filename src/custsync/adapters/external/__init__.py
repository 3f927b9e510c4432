"""Public interface for the external customer payload adapter."""

from __future__ import annotations

from .schema import (
    AddressPayload,
    ExternalCustomerPayload,
    ExternalCustomerPayloadInput,
    ShoppingListPayload,
)
from .translator import InvalidPayloadError, load_external_customer, parse_external_customer

__all__ = [
    "AddressPayload",
    "ExternalCustomerPayload",
    "ExternalCustomerPayloadInput",
    "InvalidPayloadError",
    "ShoppingListPayload",
    "load_external_customer",
    "parse_external_customer",
]
