"""
Runs the Qt workers synchronously (run() instead of start()) and checks the
signals they emit. Skipped when PySide6 widgets cannot be imported.
"""

import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import QCoreApplication

from shifter_core import ShiftOptions, ShiftResult, RenamePlan, expand_pattern, plan_shift
from shifter_gui.gui_workers import PlanWorker, ShiftWorker

from tests.helpers import listing


@pytest.fixture(scope="module")
def qt_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


def test_plan_worker_emits_plan(qt_app, make_files, pattern_in) -> None:
    make_files(["file1.txt", "file2.txt"])
    plans, errors = [], []

    worker = PlanWorker(pattern_in("file*.txt"), 1)
    worker.finished.connect(lambda value: plans.append(value))
    worker.error.connect(lambda value: errors.append(value))
    worker.run()

    assert errors == []
    assert len(plans) == 1
    assert isinstance(plans[0], RenamePlan)
    assert [e.final_name for e in plans[0].entries] == ["file3.txt", "file2.txt"]


def test_plan_worker_reports_no_match(qt_app, pattern_in) -> None:
    plans, errors = [], []

    worker = PlanWorker(pattern_in("missing*.txt"), 1)
    worker.finished.connect(lambda value: plans.append(value))
    worker.error.connect(lambda value: errors.append(value))
    worker.run()

    assert plans == []
    assert "No files found" in errors[0]


def test_shift_worker_runs_plan(qt_app, make_files, pattern_in, tmp_path) -> None:
    make_files(["file1.txt", "file2.txt"])
    plan = plan_shift(expand_pattern(pattern_in("file*.txt")), 1)
    progress, results = [], []

    worker = ShiftWorker(plan)
    worker.progress.connect(lambda c, t, m: progress.append((c, t)))
    worker.finished.connect(lambda value: results.append(value))
    worker.run()

    assert listing(tmp_path) == ["file2.txt", "file3.txt"]
    assert progress[-1] == (4, 4)
    assert isinstance(results[0], ShiftResult)
    assert results[0].success_count == 2


def test_shift_worker_forwards_entry_errors(qt_app, make_files, pattern_in) -> None:
    make_files(["file1.txt", "file2.txt"])
    plan = plan_shift(expand_pattern(pattern_in("file1.txt")), 1, ShiftOptions())
    entry_errors = []

    worker = ShiftWorker(plan)
    worker.entry_error.connect(lambda value: entry_errors.append(value))
    worker.run()

    assert len(entry_errors) == 1
    assert "Destination already exists" in entry_errors[0]
