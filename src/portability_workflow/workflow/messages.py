from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .stages import WorkflowStage


class WorkflowQueueMessage(BaseModel):
    """Resume ``submission_id`` at ``stage``.

    The unit exchanged with the external queue. Immutable and compared by value.
    Callers must pass a non-empty submission id; the engine does not check it.

    On the wire the message is ``{"submissionId": "...", "stage": <int>}``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    submission_id: str = Field(alias="submissionId")
    stage: WorkflowStage

    @classmethod
    def new(cls, submission_id: str, stage: WorkflowStage) -> WorkflowQueueMessage:
        return cls(submission_id=submission_id, stage=stage)

    @property
    def is_terminal(self) -> bool:
        return self.stage.is_terminal

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str | bytes) -> WorkflowQueueMessage:
        return cls.model_validate_json(raw)
