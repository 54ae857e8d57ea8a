"""Workflow domain concepts.

This package introduces first-class types for:
- Workflow stages (a fixed, linear sequence)
- Workflow actions (one async unit of work per non-terminal stage)
- Queue messages (submission id + stage)
- The manager that binds stages to actions and chains them

Queue transport and the business work of each stage live outside this package.
"""

__all__: list[str] = []
