"""Translate external customer payloads into domain objects."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from custsync.domain.model import Address, ExternalCustomer, ShoppingList

from .schema import ExternalCustomerPayload

if TYPE_CHECKING:
    from pathlib import Path

    from .schema import AddressPayload, ExternalCustomerPayloadInput, ShoppingListPayload

log = getLogger(__name__)


class InvalidPayloadError(ValueError):
    """Raised when an external customer payload cannot be parsed."""


def _ensure_payload(payload: ExternalCustomerPayloadInput) -> ExternalCustomerPayload:
    if isinstance(payload, ExternalCustomerPayload):
        return payload
    try:
        return ExternalCustomerPayload.model_validate(payload)
    except ValidationError as exc:
        raise InvalidPayloadError(f"Invalid external customer payload: {exc}") from exc


def parse_external_customer(payload: ExternalCustomerPayloadInput) -> ExternalCustomer:
    """Return the domain ``ExternalCustomer`` described by ``payload``."""

    parsed = _ensure_payload(payload)
    if not parsed.is_company and parsed.company_number is not None:
        log.warning(
            "Ignoring company number %s on person payload %s",
            parsed.company_number,
            parsed.external_id,
        )
    if parsed.is_company and parsed.bonus_points is not None:
        log.warning("Ignoring bonus points on company payload %s", parsed.external_id)

    return ExternalCustomer(
        external_id=parsed.external_id,
        is_company=parsed.is_company,
        company_number=parsed.company_number if parsed.is_company else None,
        name=parsed.name,
        postal_address=_build_address(parsed.address),
        preferred_store=parsed.preferred_store,
        bonus_points=None if parsed.is_company else parsed.bonus_points,
        shopping_lists=tuple(_build_shopping_list(item) for item in parsed.shopping_lists),
    )


def load_external_customer(path: Path) -> ExternalCustomer:
    """Read a single JSON payload from ``path``."""

    try:
        with path.open(encoding="utf-8") as handle:
            raw = json.load(handle)
    except json.JSONDecodeError as exc:
        raise InvalidPayloadError(f"{path} is not valid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise InvalidPayloadError(f"{path} is not UTF-8 encoded: {exc}") from exc
    if not isinstance(raw, dict):
        raise InvalidPayloadError(f"{path} must contain a JSON object")
    return parse_external_customer(raw)  # pyright: ignore[reportUnknownArgumentType]


def _build_address(payload: AddressPayload | None) -> Address | None:
    if payload is None:
        return None
    address = Address(street=payload.street, city=payload.city, postal_code=payload.postal_code)
    return None if address.is_empty else address


def _build_shopping_list(payload: ShoppingListPayload) -> ShoppingList:
    return ShoppingList(list_id=payload.list_id, products=list(payload.products))
