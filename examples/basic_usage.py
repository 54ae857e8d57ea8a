#!/usr/bin/env python3
"""Programmatic workflow example.

This demonstrates using the workflow components directly:

* load settings from `.env`
* build a workflow manager with the built-in actions
* drive one submission from Analyze to Finished through an in-memory queue
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence

from portability_workflow.config import WorkflowSettings
from portability_workflow.logging import configure_logging
from portability_workflow.workflow.cancellation import CancellationToken
from portability_workflow.workflow.consumer import run_to_completion
from portability_workflow.workflow.manager import WorkflowManager


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run one submission through the workflow.")
    parser.add_argument("--submission-id", required=True, help="Opaque submission identifier")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = WorkflowSettings()
    configure_logging(settings.log_level, json_output=settings.log_json)

    history = asyncio.run(
        run_to_completion(
            manager=WorkflowManager(),
            submission_id=args.submission_id,
            cancel_token=CancellationToken(),
            max_steps=settings.max_steps,
        )
    )

    print(" -> ".join(msg.stage.name for msg in history))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
