"""
This module contains the data models for the step serialization.
"""

from typing import Any, Optional

from pydantic import BaseModel


class StepModel(BaseModel):
    """Step serialization model"""
    step_id: Any
    task_id: Any
    step_name: Optional[Any] = None
    owner: Optional[Any] = None
    status: Optional[Any] = None
    extensions: dict[str, Any] = {}
