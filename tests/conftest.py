from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest
from loguru import logger

from taskrecords.logger import LoggingManager, SingletonMeta


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    SingletonMeta._instances.pop(LoggingManager, None)
    logger.remove()
    logger.disable("taskrecords")


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    messages: list[str] = []
    logger.enable("taskrecords")
    sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    try:
        logger.remove(sink_id)
    except ValueError:
        pass


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[Any], Path]:
    def _write(document: Any) -> Path:
        path = tmp_path / "task.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
