import json

from shifter_core import (
    FileSystemError,
    ShiftOptions,
    execute_shift,
    expand_pattern,
    plan_shift,
    restore_staged_files,
)

from tests.helpers import listing


def _run(pattern, shift, options=None, **kwargs):
    plan = plan_shift(expand_pattern(pattern), shift, options)
    return plan, execute_shift(plan, **kwargs)


def test_shift_up_over_own_names(make_files, pattern_in, tmp_path) -> None:
    make_files(["file1.txt", "file2.txt", "file3.txt"])

    _, result = _run(pattern_in("file[0-9]*.txt"), 1)

    assert listing(tmp_path) == ["file2.txt", "file3.txt", "file4.txt"]
    assert (tmp_path / "file4.txt").read_text(encoding="utf-8") == "file3.txt"
    assert (tmp_path / "file2.txt").read_text(encoding="utf-8") == "file1.txt"
    assert result.success_count == 3
    assert result.failed_count == 0


def test_shift_keeps_hyphen_separator(make_files, pattern_in, tmp_path) -> None:
    make_files(["item-5.log"])
    _run(pattern_in("item-[0-9]*.log"), 10)
    assert listing(tmp_path) == ["item-15.log"]


def test_shift_down(make_files, pattern_in, tmp_path) -> None:
    make_files(["file2.txt"])
    _run(pattern_in("file[0-9]*.txt"), -1)
    assert listing(tmp_path) == ["file1.txt"]


def test_shift_down_over_own_names(make_files, pattern_in, tmp_path) -> None:
    make_files(["file1.txt", "file2.txt", "file3.txt"])
    _run(pattern_in("file*.txt"), -1)
    assert listing(tmp_path) == ["file0.txt", "file1.txt", "file2.txt"]
    assert (tmp_path / "file0.txt").read_text(encoding="utf-8") == "file1.txt"


def test_name_without_integer_gets_one(make_files, pattern_in, tmp_path) -> None:
    make_files(["data.txt"])
    _run(pattern_in("data.txt"), 5)
    assert listing(tmp_path) == ["data5.txt"]


def test_overflow_leaves_file_untouched(make_files, pattern_in, tmp_path) -> None:
    make_files(["big2147483647.txt", "small1.txt"])

    plan, result = _run(pattern_in("*.txt"), 1)

    assert listing(tmp_path) == ["big2147483647.txt", "small2.txt"]
    assert result.skipped_count == 1
    assert result.success_count == 1
    assert result.skipped == plan.skipped


def test_inverse_shift_restores_names(make_files, pattern_in, tmp_path) -> None:
    original = ["a1.txt", "a2.txt", "a10.txt"]
    make_files(original)

    _run(pattern_in("*.txt"), 3)
    assert listing(tmp_path) == ["a13.txt", "a4.txt", "a5.txt"]

    _run(pattern_in("*.txt"), -3)
    assert listing(tmp_path) == sorted(original)


def test_progress_counts_both_phases(make_files, pattern_in) -> None:
    make_files(["file1.txt", "file2.txt", "file3.txt"])
    calls = []

    _run(pattern_in("file*.txt"), 1, progress_callback=lambda c, t, m: calls.append((c, t, m)))

    assert [(c, t) for c, t, _ in calls] == [(i, 6) for i in range(1, 7)]
    assert calls[0][2].startswith("Processing: ")
    assert calls[0][2].endswith("file3.txt")


def test_progress_excludes_overflow(make_files, pattern_in) -> None:
    make_files(["big2147483647.txt", "small1.txt"])
    calls = []

    _run(pattern_in("*.txt"), 1, progress_callback=lambda c, t, m: calls.append((c, t)))

    assert calls == [(1, 2), (2, 2)]


def test_foreign_destination_is_not_overwritten(make_files, pattern_in, tmp_path) -> None:
    make_files(["file1.txt", "file2.txt", "file3.txt"])
    make_files(["file4.txt"])
    (tmp_path / "file4.txt").write_text("keep me", encoding="utf-8")
    errors = []

    _, result = _run(pattern_in("file[1-3].txt"), 1, error_callback=errors.append)

    # Only file3 collides; file2 takes its name, so file3 stays staged
    assert listing(tmp_path) == [".__tmp_shift__file3.txt", "file2.txt", "file3.txt", "file4.txt"]
    assert (tmp_path / "file4.txt").read_text(encoding="utf-8") == "keep me"
    assert (tmp_path / "file3.txt").read_text(encoding="utf-8") == "file2.txt"
    assert (tmp_path / "file2.txt").read_text(encoding="utf-8") == "file1.txt"
    assert result.success_count == 2
    assert result.failed_count == 1
    assert len(errors) == 1
    assert isinstance(errors[0], FileSystemError)
    assert errors[0].phase == 2
    assert errors[0].path.name == "file3.txt"
    assert "left at" in str(errors[0])


def test_failed_finalize_without_restore(make_files, pattern_in, tmp_path) -> None:
    make_files(["file1.txt", "file2.txt", "file3.txt"])
    make_files(["file4.txt"])
    options = ShiftOptions(restore_on_failure=False)

    _, result = _run(pattern_in("file[1-3].txt"), 1, options)

    assert listing(tmp_path) == [".__tmp_shift__file3.txt", "file2.txt", "file3.txt", "file4.txt"]
    assert result.failed_count == 1
    assert result.success_count == 2

    restored, failed = restore_staged_files(tmp_path)
    assert restored == []
    assert len(failed) == 1


def test_shared_destination_reports_error(make_files, pattern_in, tmp_path) -> None:
    make_files(["a01.txt", "a1.txt"])
    errors = []

    _, result = _run(pattern_in("a*.txt"), 1, error_callback=errors.append)

    assert listing(tmp_path) == ["a1.txt", "a2.txt"]
    assert (tmp_path / "a2.txt").read_text(encoding="utf-8") == "a01.txt"
    assert result.failed_count == 1
    assert errors[0].path.name == "a1.txt"
    assert "(restored)" in str(errors[0])


def test_stage_failure_skips_entry(make_files, pattern_in, tmp_path) -> None:
    make_files(["file1.txt", "file2.txt"])
    make_files([".__tmp_shift__file1.txt"])
    calls = []
    errors = []

    _, result = _run(
        pattern_in("file*.txt"),
        10,
        progress_callback=lambda c, t, m: calls.append((c, t)),
        error_callback=errors.append,
    )

    assert listing(tmp_path) == [".__tmp_shift__file1.txt", "file1.txt", "file12.txt"]
    assert result.success_count == 1
    assert errors[0].phase == 1
    assert errors[0].path.name == "file1.txt"
    # file1 drops out of the total once staging it fails
    assert calls == [(1, 4), (2, 2)]


def test_dry_run_changes_nothing(make_files, pattern_in, tmp_path) -> None:
    make_files(["file1.txt", "file2.txt"])
    calls = []

    _, result = _run(
        pattern_in("file*.txt"),
        1,
        ShiftOptions(dry_run=True),
        progress_callback=lambda c, t, m: calls.append((c, t, m)),
    )

    assert listing(tmp_path) == ["file1.txt", "file2.txt"]
    assert result.success_count == 2
    assert [m for _, _, m in calls] == ["[Preview] file2.txt -> file3.txt", "[Preview] file1.txt -> file2.txt"]


def test_json_logs(make_files, pattern_in, tmp_path) -> None:
    work = tmp_path / "work"
    work.mkdir()
    log_dir = tmp_path / "logs"
    make_files(["file1.txt", "big2147483647.txt"], directory=work)

    _run(str(work / "*.txt"), 1, ShiftOptions(log_dir=log_dir))

    plan_logs = list(log_dir.glob("shift_plan_*.json"))
    result_logs = list(log_dir.glob("shift_result_*.json"))
    assert len(plan_logs) == 1
    assert len(result_logs) == 1

    plan_data = json.loads(plan_logs[0].read_text(encoding="utf-8"))
    assert plan_data["shift"] == 1
    assert plan_data["total_ops"] == 1
    assert plan_data["skipped"][0]["shifted"] == 2147483648

    result_data = json.loads(result_logs[0].read_text(encoding="utf-8"))
    assert result_data["success_count"] == 1
    assert result_data["skipped_count"] == 1


def test_restore_staged_files(make_files, tmp_path) -> None:
    make_files([".__tmp_shift__a1.txt", ".__tmp_shift__b1.txt", "b1.txt"])

    restored, failed = restore_staged_files(tmp_path)

    assert restored == [tmp_path / "a1.txt"]
    assert [p.name for p, _ in failed] == [".__tmp_shift__b1.txt"]
    assert listing(tmp_path) == [".__tmp_shift__b1.txt", "a1.txt", "b1.txt"]


def test_result_summary(make_files, pattern_in) -> None:
    make_files(["a01.txt", "a1.txt"])
    _, result = _run(pattern_in("a*.txt"), 1)

    summary = result.summary()
    assert "Success: 1" in summary
    assert "Failed: 1" in summary
    assert "a1.txt" in summary
