"""Pydantic models describing external customer payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class ExternalBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class AddressPayload(ExternalBaseModel):
    street: str | None = None
    city: str | None = None
    postal_code: str | None = Field(default=None, alias="postalCode")

    _normalize_blanks = field_validator("street", "city", "postal_code", mode="before")(
        _blank_to_none
    )


class ShoppingListPayload(ExternalBaseModel):
    list_id: str = Field(alias="id")
    products: list[str] = Field(default_factory=list[str])

    @field_validator("list_id", mode="before")
    @classmethod
    def _stringify_id(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value


class ExternalCustomerPayload(ExternalBaseModel):
    external_id: str = Field(alias="externalId", min_length=1)
    is_company: bool = Field(default=False, alias="isCompany")
    company_number: str | None = Field(default=None, alias="companyNumber")
    name: str | None = None
    address: AddressPayload | None = Field(default=None, alias="postalAddress")
    preferred_store: str | None = Field(default=None, alias="preferredStore")
    bonus_points: int | None = Field(default=None, alias="bonusPoints", ge=0)
    shopping_lists: list[ShoppingListPayload] = Field(
        default_factory=list[ShoppingListPayload],
        alias="shoppingLists",
    )

    _normalize_blanks = field_validator(
        "external_id", "company_number", "name", "preferred_store", mode="before"
    )(_blank_to_none)

    @model_validator(mode="before")
    @classmethod
    def _accept_address_key(cls, value: object) -> object:
        """Accept ``address`` as a shorthand for ``postalAddress``."""

        if isinstance(value, Mapping):
            data: dict[str, Any] = dict(value)  # pyright: ignore[reportUnknownArgumentType]
            if "address" in data and "postalAddress" not in data:
                data["postalAddress"] = data.pop("address")
            return data
        return value

    @model_validator(mode="after")
    def _require_company_number(self) -> ExternalCustomerPayload:
        if self.is_company and self.company_number is None:
            raise ValueError("company payloads require a companyNumber")
        return self


type ExternalCustomerPayloadInput = ExternalCustomerPayload | Mapping[str, object]
