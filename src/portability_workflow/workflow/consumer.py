"""Queue consumer step for workflow messages.

The real transport (and its retry/dead-letter policy) is external. This module
only implements the consumer's side of the contract: execute one step, then
re-enqueue the result unless the submission reached the terminal stage.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from .cancellation import CancellationToken
from .errors import WorkflowStepLimitExceeded
from .manager import WorkflowManager
from .messages import WorkflowQueueMessage

logger = logging.getLogger(__name__)


class WorkflowQueue(Protocol):
    async def send(self, message: WorkflowQueueMessage) -> None: ...


class InMemoryWorkflowQueue:
    """An ``asyncio.Queue``-backed workflow queue for tests and local runs."""

    def __init__(self) -> None:
        self._queue: asyncio.Queue[WorkflowQueueMessage] = asyncio.Queue()

    async def send(self, message: WorkflowQueueMessage) -> None:
        await self._queue.put(message)

    async def receive(self) -> WorkflowQueueMessage:
        return await self._queue.get()

    def empty(self) -> bool:
        return self._queue.empty()

    def qsize(self) -> int:
        return self._queue.qsize()


async def process_queue_message(
    *,
    manager: WorkflowManager,
    message: WorkflowQueueMessage,
    queue: WorkflowQueue,
    cancel_token: CancellationToken,
) -> WorkflowQueueMessage:
    """Execute one stage and enqueue the next message unless it is terminal."""

    next_msg = await manager.execute_actions_to_next_stage(message, cancel_token)
    if next_msg.is_terminal:
        logger.info(
            "Submission finished",
            extra={"submission_id": next_msg.submission_id, "stage": next_msg.stage.name},
        )
    else:
        await queue.send(next_msg)
    return next_msg


async def run_to_completion(
    *,
    manager: WorkflowManager,
    submission_id: str,
    cancel_token: CancellationToken,
    max_steps: int,
) -> list[WorkflowQueueMessage]:
    """Drive a submission from the first stage to the terminal stage in-process.

    Returns every message observed, starting with the first-stage message.
    Actions may send a submission back to an earlier stage, so the number of
    steps is capped by ``max_steps``.
    """

    queue = InMemoryWorkflowQueue()
    history = [WorkflowManager.get_first_stage(submission_id)]
    await queue.send(history[0])

    steps = 0
    while not queue.empty():
        if steps >= max_steps:
            raise WorkflowStepLimitExceeded(submission_id, max_steps)
        message = await queue.receive()
        history.append(
            await process_queue_message(
                manager=manager, message=message, queue=queue, cancel_token=cancel_token
            )
        )
        steps += 1

    return history
