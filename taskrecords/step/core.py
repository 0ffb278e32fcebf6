"""
This module contains the class that defines a step.
"""

from collections.abc import Mapping
from typing import Any, Optional

from ..record import apply_configuration

STEP_FIELDS = ("step_id", "task_id", "step_name", "owner", "status")


class Step:
    """
    A single unit of work belonging to a task. The record does not validate anything: the identifiers are kept as
    given and every field may be changed afterward by whoever holds the step.
    """

    def __init__(self, step_id: Any, task_id: Any, configuration: Optional[Mapping[str, Any]] = None) -> None:
        self.step_id = step_id
        self.task_id = task_id
        self.step_name = None
        self.owner = None
        self.status = None

        apply_configuration(self, configuration)

    def __repr__(self) -> str:
        return f"Step({self.step_id!r}, task={self.task_id!r}, status={self.status!r})"
