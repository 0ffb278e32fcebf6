"""
This module turns the records into their serialization models. The records are only read, never modified.
"""

from .record import extension_fields
from .step.core import STEP_FIELDS, Step
from .step.models import StepModel
from .task.core import TASK_FIELDS, Task
from .task.models import TaskModel


def snapshot_step(step: Step) -> StepModel:
    return StepModel(
        step_id=step.step_id,
        task_id=step.task_id,
        step_name=step.step_name,
        owner=step.owner,
        status=step.status,
        extensions=extension_fields(step, STEP_FIELDS),
    )


def snapshot_task(task: Task) -> TaskModel:
    """
    Serialize a task together with its steps.

    :param task: Task to serialize
    :return: The task model, where ``cur_step`` is reduced to the current step's id when it has one
    """
    return TaskModel(
        task_id=task.task_id,
        org=task.org,
        acct_id=task.acct_id,
        acct_name=task.acct_name,
        task_type=task.task_type,
        steps=[snapshot_step(step) for step in task.steps],
        cur_step=getattr(task.cur_step, "step_id", task.cur_step),
        extensions=extension_fields(task, TASK_FIELDS),
    )
