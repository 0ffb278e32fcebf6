from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from taskrecords.exceptions import DocumentError
from taskrecords.run import build_task, main


def test_build_task_appends_steps_and_points_current_step() -> None:
    task = build_task(
        {
            "task_id": "T1",
            "config": {"org": "acme", "task_type": "import"},
            "steps": [
                {"step_id": "S1", "config": {"status": "done"}},
                {"step_id": "S2", "task_id": "T0", "config": {"status": "pending"}},
            ],
            "cur_step": "S2",
        }
    )

    assert task.org == "acme"
    assert [step.step_id for step in task.steps] == ["S1", "S2"]
    assert task.steps[0].task_id == "T1"
    assert task.steps[1].task_id == "T0"
    assert task.cur_step is task.steps[1]


def test_build_task_picks_first_step_with_duplicated_id() -> None:
    task = build_task({"task_id": "T1", "steps": [{"step_id": "S1"}, {"step_id": "S1"}], "cur_step": "S1"})

    assert task.cur_step is task.steps[0]


@pytest.mark.parametrize(
    ("document", "message"),
    [
        ([], "document must be an object"),
        ({"steps": []}, "no 'task_id'"),
        ({"task_id": "T1", "steps": {}}, "'steps' must be a list"),
        ({"task_id": "T1", "steps": ["S1"]}, "step #0 must be an object"),
        ({"task_id": "T1", "steps": [{"config": {}}]}, "step #0 has no 'step_id'"),
        ({"task_id": "T1", "steps": [{"step_id": "S1"}], "cur_step": "S2"}, "is not one of the task's steps"),
    ],
)
def test_build_task_rejects_malformed_documents(document: Any, message: str) -> None:
    with pytest.raises(DocumentError, match=message):
        build_task(document)


def test_main_prints_task_snapshot(
    write_document: Callable[[Any], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_document(
        {"task_id": "T1", "config": {"steps": ["ignored"]}, "steps": [{"step_id": "S1"}], "cur_step": "S1"}
    )

    assert main([str(path), "--indent", "0"]) == 0

    snapshot = json.loads(capsys.readouterr().out)
    assert snapshot["task_id"] == "T1"
    assert snapshot["cur_step"] == "S1"
    assert [step["step_id"] for step in snapshot["steps"]] == ["S1"]


def test_main_reports_invalid_configuration(
    write_document: Callable[[Any], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_document({"task_id": "T1", "config": [1, 2]})

    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "could not build task" in captured.err


def test_main_reports_missing_file(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.json")]) == 1


def test_main_reports_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    assert main([str(path)]) == 1
