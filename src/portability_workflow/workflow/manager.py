"""Binds workflow stages to actions and advances submissions one stage at a time.

Stages run in the order Analyze -> Report -> Telemetry -> Finished.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import ClassVar

from .actions import DEFAULT_ACTION_TYPES, WorkflowAction
from .cancellation import CancellationToken
from .errors import StageMismatchError, StageOutOfRangeError
from .messages import WorkflowQueueMessage
from .stages import FIRST_STAGE, action_stages

logger = logging.getLogger(__name__)


def build_default_actions() -> tuple[WorkflowAction, ...]:
    """One built-in action per non-terminal stage, at the index of its stage."""

    slots: list[WorkflowAction | None] = [None] * len(action_stages())
    for action_type in DEFAULT_ACTION_TYPES:
        action = action_type()
        slots[int(action.current_stage)] = action

    missing = [stage.name for stage, action in zip(action_stages(), slots) if action is None]
    if missing:
        raise RuntimeError(f"No built-in action for stage(s): {', '.join(missing)}")
    return tuple(action for action in slots if action is not None)


class WorkflowManager:
    """Executes the action bound to a message's stage and returns the next message.

    Prefer constructing one explicitly at the process entry point and passing it
    to the queue consumer. ``initialize()`` exists for callers that want a shared
    process-wide instance instead.

    The slot table is read-only after construction, so concurrent
    ``execute_actions_to_next_stage`` calls need no locking.
    """

    _instance: ClassVar[WorkflowManager | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, actions: Sequence[WorkflowAction] | None = None) -> None:
        # An injected table is adopted verbatim; slots are checked per call.
        self._actions: tuple[WorkflowAction, ...] = (
            build_default_actions() if actions is None else tuple(actions)
        )

    @classmethod
    def initialize(cls, actions: Sequence[WorkflowAction] | None = None) -> WorkflowManager:
        """Return the shared manager, creating it on first call.

        The first caller wins. Later calls, with or without ``actions``, return
        the existing instance unchanged.
        """

        instance = cls._instance
        if instance is not None:
            return instance

        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls(actions)
                logger.info(
                    "Workflow manager initialized",
                    extra={
                        "injected": actions is not None,
                        "slots": [type(a).__name__ for a in cls._instance.actions],
                    },
                )
            return cls._instance

    @property
    def actions(self) -> tuple[WorkflowAction, ...]:
        return self._actions

    @staticmethod
    def get_first_stage(submission_id: str) -> WorkflowQueueMessage:
        """Message that starts the workflow for a new submission."""

        return WorkflowQueueMessage.new(submission_id, FIRST_STAGE)

    async def execute_actions_to_next_stage(
        self, current_msg: WorkflowQueueMessage, cancel_token: CancellationToken
    ) -> WorkflowQueueMessage:
        """Run the action for ``current_msg.stage`` and return the next stage's message.

        Raises:
            StageOutOfRangeError: The stage has no slot (e.g. ``FINISHED``).
            StageMismatchError: The slot holds an action for another stage.

        Errors raised by the action, and cancellation, propagate unchanged and
        no message is produced.
        """

        stage = current_msg.stage
        extra = {"submission_id": current_msg.submission_id, "stage": stage.name}

        if not 0 <= int(stage) < len(self._actions):
            logger.error("Message stage has no bound action", extra=extra)
            raise StageOutOfRangeError(stage, len(self._actions))

        action = self._actions[int(stage)]
        action_stage = action.current_stage
        if action_stage != stage:
            logger.error(
                "Action stage does not match its slot",
                extra={**extra, "action_stage": getattr(action_stage, "name", repr(action_stage))},
            )
            raise StageMismatchError(stage, action_stage)

        logger.info("Executing workflow stage", extra=extra)
        next_stage = await action.execute(current_msg.submission_id, cancel_token)
        next_msg = WorkflowQueueMessage.new(current_msg.submission_id, next_stage)
        logger.info(
            "Workflow stage completed",
            extra={**extra, "next_stage": next_msg.stage.name},
        )
        return next_msg
