"""
This module contains the data models for the task serialization.
"""

from typing import Any, Optional

from pydantic import BaseModel

from ..step.models import StepModel


class TaskModel(BaseModel):
    """Task serialization model, ``cur_step`` holds the id of the current step"""
    task_id: Any
    org: Optional[Any] = None
    acct_id: Optional[Any] = None
    acct_name: Optional[Any] = None
    task_type: Optional[Any] = None
    steps: list[StepModel] = []
    cur_step: Optional[Any] = None
    extensions: dict[str, Any] = {}
