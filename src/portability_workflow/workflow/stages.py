from __future__ import annotations

from enum import IntEnum


class WorkflowStage(IntEnum):
    """Workflow stages, in execution order: Analyze -> Report -> Telemetry -> Finished.

    The integer value is the slot index of the stage's action. ``FINISHED`` is
    terminal and has no action. Adding a stage means adding its action too.
    """

    ANALYZE = 0
    REPORT = 1
    TELEMETRY = 2
    FINISHED = 3

    @property
    def is_terminal(self) -> bool:
        return self is TERMINAL_STAGE

    @property
    def successor(self) -> WorkflowStage:
        """The stage that follows this one in declaration order."""

        if self.is_terminal:
            raise ValueError(f"{self.name} is terminal and has no successor")
        return WorkflowStage(self.value + 1)


FIRST_STAGE = WorkflowStage.ANALYZE
TERMINAL_STAGE = WorkflowStage.FINISHED


def action_stages() -> list[WorkflowStage]:
    """Stages that have a bound action, in order."""

    return [stage for stage in WorkflowStage if not stage.is_terminal]
