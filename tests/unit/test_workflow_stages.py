"""Unit tests for the workflow stage enumeration and queue messages."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from portability_workflow.workflow.messages import WorkflowQueueMessage
from portability_workflow.workflow.stages import (
    FIRST_STAGE,
    TERMINAL_STAGE,
    WorkflowStage,
    action_stages,
)


def test_stages_are_ordered_with_terminal_last() -> None:
    assert list(WorkflowStage) == [
        WorkflowStage.ANALYZE,
        WorkflowStage.REPORT,
        WorkflowStage.TELEMETRY,
        WorkflowStage.FINISHED,
    ]
    assert FIRST_STAGE is WorkflowStage.ANALYZE
    assert TERMINAL_STAGE is WorkflowStage.FINISHED
    assert TERMINAL_STAGE.is_terminal
    assert not any(stage.is_terminal for stage in action_stages())


def test_action_stages_has_one_slot_per_non_terminal_stage() -> None:
    stages = action_stages()
    assert len(stages) == len(WorkflowStage) - 1
    assert [int(s) for s in stages] == list(range(len(stages)))


def test_successor_follows_declaration_order() -> None:
    assert WorkflowStage.ANALYZE.successor is WorkflowStage.REPORT
    assert WorkflowStage.TELEMETRY.successor is WorkflowStage.FINISHED
    with pytest.raises(ValueError):
        _ = WorkflowStage.FINISHED.successor


def test_message_is_immutable_and_compared_by_value() -> None:
    msg = WorkflowQueueMessage.new("abc123", WorkflowStage.REPORT)

    assert msg == WorkflowQueueMessage(submission_id="abc123", stage=WorkflowStage.REPORT)
    assert hash(msg) == hash(WorkflowQueueMessage.new("abc123", WorkflowStage.REPORT))
    assert msg != WorkflowQueueMessage.new("abc123", WorkflowStage.TELEMETRY)
    with pytest.raises(ValidationError):
        msg.stage = WorkflowStage.FINISHED  # type: ignore[misc]


def test_message_wire_format() -> None:
    msg = WorkflowQueueMessage.new("abc123", WorkflowStage.TELEMETRY)
    raw = msg.to_json()

    assert raw == '{"submissionId":"abc123","stage":2}'
    assert WorkflowQueueMessage.from_json(raw) == msg
    assert WorkflowQueueMessage.from_json('{"submissionId": "x", "stage": 3}').is_terminal


def test_message_rejects_unknown_stage() -> None:
    with pytest.raises(ValidationError):
        WorkflowQueueMessage.from_json('{"submissionId": "abc123", "stage": 7}')
