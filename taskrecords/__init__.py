"""
Loosely-typed task and step records, with their serialization models.
"""

from loguru import logger as _loguru_logger

from .exceptions import DocumentError, InvalidConfigurationError, TaskRecordsError
from .snapshot import snapshot_step, snapshot_task
from .step import Step
from .step.models import StepModel
from .task import Task
from .task.models import TaskModel

# silent unless a LoggingManager is instantiated
_loguru_logger.disable("taskrecords")
