from __future__ import annotations

import logging
from typing import ClassVar, Protocol

from .cancellation import CancellationToken
from .stages import WorkflowStage

logger = logging.getLogger(__name__)


class WorkflowAction(Protocol):
    """The unit of work bound to one non-terminal stage.

    ``execute`` returns the stage to run next. That is usually the successor,
    but an action may return any stage (repeat itself, skip ahead or go back);
    the manager does not interpret it. Failures propagate as exceptions and
    cancellation as ``asyncio.CancelledError``.
    """

    @property
    def current_stage(self) -> WorkflowStage: ...

    async def execute(
        self, submission_id: str, cancel_token: CancellationToken
    ) -> WorkflowStage: ...


class StageAction:
    """Base class for the built-in actions.

    Subclasses set ``stage`` and override ``perform`` with the stage's work.
    """

    stage: ClassVar[WorkflowStage]

    @property
    def current_stage(self) -> WorkflowStage:
        return self.stage

    async def execute(self, submission_id: str, cancel_token: CancellationToken) -> WorkflowStage:
        cancel_token.raise_if_cancelled()
        extra = {"submission_id": submission_id, "stage": self.stage.name}
        logger.debug("Stage action started", extra=extra)

        await self.perform(submission_id, cancel_token)

        cancel_token.raise_if_cancelled()
        next_stage = self.next_stage()
        logger.debug("Stage action finished", extra={**extra, "next_stage": next_stage.name})
        return next_stage

    async def perform(self, submission_id: str, cancel_token: CancellationToken) -> None:
        """Stage work. The built-in actions have none of their own."""

    def next_stage(self) -> WorkflowStage:
        return self.stage.successor

    def __repr__(self) -> str:
        return f"{type(self).__name__}(stage={self.stage.name})"


class AnalyzeAction(StageAction):
    stage = WorkflowStage.ANALYZE


class ReportAction(StageAction):
    stage = WorkflowStage.REPORT


class TelemetryAction(StageAction):
    stage = WorkflowStage.TELEMETRY


DEFAULT_ACTION_TYPES: tuple[type[StageAction], ...] = (
    AnalyzeAction,
    ReportAction,
    TelemetryAction,
)
