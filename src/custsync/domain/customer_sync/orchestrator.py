"""Ordered execution of synchronization stages."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from custsync.domain.customer_sync.stages import DEFAULT_STAGES

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from custsync.domain.customer_sync.state import SyncContext, SyncState

log = getLogger(__name__)

type SyncStage = Callable[[SyncState, SyncContext], SyncState]


@dataclass(slots=True)
class SyncPipeline:
    """Run the stages in order, feeding each the state returned by the previous one."""

    stages: Sequence[SyncStage] = field(default_factory=lambda: DEFAULT_STAGES)

    def with_stage(self, stage: SyncStage) -> SyncPipeline:
        """Return a new pipeline appending ``stage`` at the end."""

        return SyncPipeline(stages=(*self.stages, stage))

    def extend(self, stages: Iterable[SyncStage]) -> SyncPipeline:
        return SyncPipeline(stages=(*self.stages, *tuple(stages)))

    def run(self, state: SyncState, *, context: SyncContext) -> SyncState:
        for stage in self.stages:
            log.debug(
                "Running stage %s for external id %s",
                getattr(stage, "__name__", repr(stage)),
                state.external.external_id,
            )
            state = stage(state, context)
        return state
