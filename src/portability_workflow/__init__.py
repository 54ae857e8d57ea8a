"""Portability Workflow.

A small stage-progression engine for queue-driven submissions:
- an ordered, closed set of workflow stages
- pluggable async actions bound one per stage
- a manager that executes the bound action and yields the next queue message
"""

__version__ = "0.1.0"

from portability_workflow.config import WorkflowSettings
from portability_workflow.workflow.manager import WorkflowManager
from portability_workflow.workflow.messages import WorkflowQueueMessage
from portability_workflow.workflow.stages import WorkflowStage

__all__ = [
    "__version__",
    "WorkflowManager",
    "WorkflowQueueMessage",
    "WorkflowSettings",
    "WorkflowStage",
]
