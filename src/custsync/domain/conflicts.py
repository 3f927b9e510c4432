"""Conflict outcomes raised by customer matching.

Conflicts are returned as values so callers pattern-match on them next to the
successful outcome. ``as_error`` converts a conflict into the matching exception
for callers that prefer to propagate.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from custsync.domain.model import CompanyNumber, CustomerType, ExternalId


class ConflictKind(StrEnum):
    TYPE = "type"
    IDENTITY = "identity"


class CustomerConflictError(RuntimeError):
    """Raised when an external customer cannot be reconciled with stored data."""


class TypeConflictError(CustomerConflictError):
    """Stored customer type disagrees with the incoming variant."""


class IdentityConflictError(CustomerConflictError):
    """A company number is already claimed by another external identity."""


@dataclass(frozen=True, slots=True, kw_only=True)
class TypeConflict:
    external_id: ExternalId
    expected: CustomerType
    found: CustomerType | None
    kind: Literal[ConflictKind.TYPE] = ConflictKind.TYPE
    status: Literal["conflict"] = "conflict"

    @property
    def message(self) -> str:
        return (
            f"Existing customer for external customer {self.external_id} already exists "
            f"and is not a {self.expected}"
        )

    def as_error(self) -> TypeConflictError:
        return TypeConflictError(self.message)


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityConflict:
    company_number: CompanyNumber
    external_id: ExternalId
    found_external_id: ExternalId
    kind: Literal[ConflictKind.IDENTITY] = ConflictKind.IDENTITY
    status: Literal["conflict"] = "conflict"

    @property
    def message(self) -> str:
        return (
            f"Existing customer for company number {self.company_number} doesn't match "
            f"external id {self.external_id}, instead found {self.found_external_id}"
        )

    def as_error(self) -> IdentityConflictError:
        return IdentityConflictError(self.message)


type Conflict = TypeConflict | IdentityConflict
