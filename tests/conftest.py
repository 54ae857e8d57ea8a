"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from portability_workflow.workflow.cancellation import CancellationToken
from portability_workflow.workflow.manager import WorkflowManager
from portability_workflow.workflow.stages import WorkflowStage


@dataclass
class FakeAction:
    """A scripted workflow action that records its calls."""

    current_stage: WorkflowStage
    returns: WorkflowStage
    calls: list[str] = field(default_factory=list)

    async def execute(self, submission_id: str, cancel_token: CancellationToken) -> WorkflowStage:
        cancel_token.raise_if_cancelled()
        self.calls.append(submission_id)
        return self.returns


@pytest.fixture(autouse=True)
def reset_shared_manager(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give every test a fresh, uninitialized shared manager."""
    monkeypatch.setattr(WorkflowManager, "_instance", None)


@pytest.fixture
def cancel_token() -> CancellationToken:
    """Provide a token that is never cancelled."""
    return CancellationToken()


@pytest.fixture
def fake_actions() -> list[FakeAction]:
    """Provide one fake action per non-terminal stage, each advancing by one."""
    return [
        FakeAction(current_stage=WorkflowStage.ANALYZE, returns=WorkflowStage.REPORT),
        FakeAction(current_stage=WorkflowStage.REPORT, returns=WorkflowStage.TELEMETRY),
        FakeAction(current_stage=WorkflowStage.TELEMETRY, returns=WorkflowStage.FINISHED),
    ]


@pytest.fixture
def make_action() -> Callable[[WorkflowStage, WorkflowStage], FakeAction]:
    """Provide a factory for single fake actions."""

    def _make(current_stage: WorkflowStage, returns: WorkflowStage) -> FakeAction:
        return FakeAction(current_stage=current_stage, returns=returns)

    return _make
