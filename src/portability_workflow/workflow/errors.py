"""Errors raised by the workflow engine.

Invariant errors derive from ``AssertionError``: they signal a defect in the
caller or in the slot table, not a runtime condition, and are never retried.
Action failures and cancellation are not wrapped; they reach the caller as-is.
"""

from __future__ import annotations

from .stages import WorkflowStage


class WorkflowInvariantError(AssertionError):
    pass


class StageOutOfRangeError(WorkflowInvariantError):
    """The message's stage has no slot in the action table."""

    def __init__(self, stage: WorkflowStage, slot_count: int) -> None:
        super().__init__(
            f"Stage must be within bounds of the action table: "
            f"{stage.name} ({int(stage)}) not in [0, {slot_count})"
        )
        self.stage = stage
        self.slot_count = slot_count


class StageMismatchError(WorkflowInvariantError):
    """The action in a slot reports a different stage than the slot."""

    def __init__(self, expected: WorkflowStage, actual: object) -> None:
        # Injected tables are not validated, so `actual` may not be a stage at all.
        actual_name = actual.name if isinstance(actual, WorkflowStage) else repr(actual)
        super().__init__(
            f"Action's stage must match current message's stage: "
            f"slot {expected.name} holds an action for {actual_name}"
        )
        self.expected = expected
        self.actual = actual


class WorkflowStepLimitExceeded(RuntimeError):
    def __init__(self, submission_id: str, max_steps: int) -> None:
        super().__init__(
            f"Submission {submission_id!r} did not reach the terminal stage "
            f"within {max_steps} steps"
        )
        self.submission_id = submission_id
        self.max_steps = max_steps
