"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class CustomerType(StrEnum):
    PERSON = "person"
    COMPANY = "company"


class MatchTerm(StrEnum):
    """Which lookup rule produced the primary match."""

    EXTERNAL_ID = "by-external-id"
    COMPANY_NUMBER = "by-company-number"
