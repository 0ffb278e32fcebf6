"""
Command line entry point: reads a task document, builds the records and prints the task snapshot.

A document looks like::

    {"task_id": "T1", "config": {"org": "acme"},
     "steps": [{"step_id": "S1", "config": {"status": "pending"}}],
     "cur_step": "S1"}
"""

import json
import sys
from typing import Any, Optional, Sequence

from .exceptions import DocumentError, TaskRecordsError
from .logger import LoggingManager
from .parser import parse_args
from .snapshot import snapshot_task
from .step.core import Step
from .task.core import Task


def _require_mapping(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise DocumentError(f"{what} must be an object, not {type(value).__name__}")
    return value


def build_task(document: dict[str, Any]) -> Task:
    """
    Build a task from a decoded document, append its steps in order and point the current step.

    :param document: Decoded JSON document
    :return: The populated task
    :raise DocumentError: The document is malformed or names an unknown current step
    """
    document = _require_mapping(document, "document")
    if "task_id" not in document:
        raise DocumentError("document has no 'task_id'")

    task = Task(document["task_id"], document.get("config"))

    steps = document.get("steps", [])
    if not isinstance(steps, list):
        raise DocumentError(f"'steps' must be a list, not {type(steps).__name__}")

    for position, entry in enumerate(steps):
        entry = _require_mapping(entry, f"step #{position}")
        if "step_id" not in entry:
            raise DocumentError(f"step #{position} has no 'step_id'")
        task.steps.append(Step(entry["step_id"], entry.get("task_id", task.task_id), entry.get("config")))

    if (cur_step_id := document.get("cur_step")) is not None:
        task.cur_step = next((step for step in task.steps if step.step_id == cur_step_id), None)
        if task.cur_step is None:
            raise DocumentError(f"current step {cur_step_id!r} is not one of the task's steps")

    return task


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    LoggingManager(verbose=args.verbose, debug=args.debug, log_file=args.log_file)
    logger = LoggingManager.get_logger("cli", app="CLI")

    try:
        with open(args.document, "r", encoding="utf-8") as file:
            document = json.load(file)
        task = build_task(document)
    except (OSError, json.JSONDecodeError, TaskRecordsError) as e:
        logger.error(f"could not build task from {args.document}: {e}")
        return 1

    logger.info(f"built task {task.task_id!r} with {len(task.steps)} step(s)")
    print(snapshot_task(task).model_dump_json(indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
