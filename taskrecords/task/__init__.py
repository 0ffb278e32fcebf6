"""
This package contains the task record.
"""

from .core import TASK_FIELDS, Task
