"""
This module contains the class that defines a task.
"""

from collections.abc import Mapping
from typing import Any, Optional

from ..logger import LoggingManager
from ..record import apply_configuration
from ..step.core import Step

TASK_FIELDS = ("task_id", "org", "acct_id", "acct_name", "task_type", "steps", "cur_step")


class Task:
    """
    A top level unit of work. The task owns its ordered list of steps and keeps a pointer to the current one.

    Steps are appended and ``cur_step`` is moved by the callers, the task never does it by itself, and nothing checks
    that ``cur_step`` is one of ``steps``.
    """

    def __init__(self, task_id: Any, configuration: Optional[Mapping[str, Any]] = None) -> None:
        self.task_id = task_id
        self.org = None
        self.acct_id = None
        self.acct_name = None
        self.task_type = None

        apply_configuration(self, configuration)

        # the step collection always starts empty, whatever the configuration held
        if configuration is not None and ("steps" in configuration or "cur_step" in configuration):
            LoggingManager.get_logger("records").debug(f"Task {task_id!r}: discarding configured steps/cur_step")
        self.steps: list[Step] = []
        self.cur_step: Optional[Step] = None

    def __repr__(self) -> str:
        return f"Task({self.task_id!r}, type={self.task_type!r}, steps={len(self.steps)})"
