"""The five synchronization stages.

Each stage takes the current ``SyncState`` and returns the next one. They are
plain functions so the pipeline can be recomposed in tests.
"""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from custsync.domain.model import Customer

if TYPE_CHECKING:
    from custsync.domain.customer_sync.state import SyncContext, SyncState
    from custsync.domain.ports.persistence import CustomerDataAccess

log = getLogger(__name__)


def acquire_or_create(state: SyncState, context: SyncContext) -> SyncState:
    """Reuse the matched primary customer or start a new one."""

    _ = context
    matched = state.matches.customer
    if matched is not None:
        return replace(state, customer=matched, created=False)
    return replace(
        state,
        customer=Customer.with_external_id(state.external.external_id),
        created=True,
    )


def populate_fields(state: SyncState, context: SyncContext) -> SyncState:
    """Copy the external record's fields onto the customer."""

    _ = context
    customer = state.require_customer()
    external = state.external
    customer.name = external.name
    customer.customer_type = state.variant.customer_type
    customer.address = external.postal_address
    customer.preferred_store = external.preferred_store
    state.variant.populate_overlay(customer, external)
    return state


def persist_customer(state: SyncState, context: SyncContext) -> SyncState:
    stored = _persist(state.require_customer(), context.data_access)
    return replace(state, customer=stored)


def resolve_duplicates(state: SyncState, context: SyncContext) -> SyncState:
    """Create or update every duplicate slot, syncing the primary's name onto it."""

    primary = state.require_customer()
    for slot in state.matches.duplicates:
        duplicate = slot if slot is not None else Customer.with_external_id(
            state.external.external_id
        )
        duplicate.name = primary.name
        _persist(duplicate, context.data_access)
    return state


def propagate_relations(state: SyncState, context: SyncContext) -> SyncState:
    """Point the external record's shopping lists at the resolved customer."""

    customer = state.require_customer()
    for shopping_list in state.external.shopping_lists:
        context.data_access.relink_shopping_list(customer, shopping_list)
    return state


def _persist(customer: Customer, data_access: CustomerDataAccess) -> Customer:
    if not customer.is_persisted:
        log.debug("Creating customer for external id %s", customer.external_id)
        return data_access.create_customer(customer)
    log.debug("Updating customer %s", customer.internal_id)
    return data_access.update_customer(customer)


DEFAULT_STAGES = (
    acquire_or_create,
    populate_fields,
    persist_customer,
    resolve_duplicates,
    propagate_relations,
)
