"""Customer synchronization pipeline.

Matching runs first and decides between a conflict and a ``MatchResult``. Only a
``MatchResult`` enters the pipeline, whose stages run in fixed order:
acquire-or-create, populate, persist, resolve duplicates, propagate relations.
"""

from __future__ import annotations

from .orchestrator import SyncPipeline, SyncStage
from .runner import CustomerSync, SyncCompleted, SyncResult
from .stages import (
    DEFAULT_STAGES,
    acquire_or_create,
    persist_customer,
    populate_fields,
    propagate_relations,
    resolve_duplicates,
)
from .state import SyncContext, SyncState
from .variants import COMPANY, PERSON, CustomerVariant, select_variant

__all__ = [
    "COMPANY",
    "DEFAULT_STAGES",
    "PERSON",
    "CustomerSync",
    "CustomerVariant",
    "SyncCompleted",
    "SyncContext",
    "SyncPipeline",
    "SyncResult",
    "SyncStage",
    "SyncState",
    "acquire_or_create",
    "persist_customer",
    "populate_fields",
    "propagate_relations",
    "resolve_duplicates",
    "select_variant",
]
