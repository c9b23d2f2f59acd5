#!/usr/bin/env python3
"""
Tests for plan execution and per-file error collection.
"""

import os

from core import PatternRule, RenamePlan, execute_rename, plan_pattern_rename


def test_execute_renames_every_entry(make_files, tmp_path):
    files = make_files("a.txt", "b.txt")
    plan = plan_pattern_rename(files, PatternRule(prefix="new_"))

    result = execute_rename(plan)

    assert result.ok
    assert result.success_count == 2
    for entry in plan.entries:
        assert not entry.source.full_path.exists()
        assert entry.target.exists()


def test_missing_source_is_reported_and_batch_continues(make_files, tmp_path):
    files = make_files("a.txt", "b.txt")
    plan = plan_pattern_rename(files, PatternRule(prefix="new_"))
    os.remove(files[0].full_path)

    result = execute_rename(plan)

    assert len(result.errors) == 1
    assert result.errors[0].startswith("Failed to rename a.txt:")
    assert (tmp_path / "new_b.txt").exists()


def test_target_created_after_planning_is_not_overwritten(make_files, tmp_path):
    files = make_files("a.txt")
    plan = plan_pattern_rename(files, PatternRule(prefix="new_"))
    (tmp_path / "new_a.txt").write_text("someone else")

    result = execute_rename(plan)

    assert result.errors == ["Failed to rename a.txt: target new_a.txt already exists"]
    assert (tmp_path / "new_a.txt").read_text() == "someone else"
    assert files[0].full_path.exists()


def test_hardlink_appearing_at_target_is_reported(make_files, tmp_path):
    files = make_files("a.txt")
    plan = plan_pattern_rename(files, PatternRule(prefix="new_"))
    os.link(files[0].full_path, tmp_path / "new_a.txt")

    result = execute_rename(plan)

    assert result.errors == ["Failed to rename a.txt: target new_a.txt already exists"]
    assert files[0].full_path.exists()


def test_errors_follow_input_order(make_files, tmp_path):
    plan = RenamePlan()
    a, b, c = make_files("a.txt", "b.txt", "c.txt")
    plan.add_entry(a, tmp_path / "a2.txt", index=0)
    plan.add_failure(1, "Cannot rename b.txt: target file already exists")
    plan.add_entry(c, tmp_path / "c2.txt", index=2)
    os.remove(a.full_path)
    os.remove(c.full_path)

    result = execute_rename(plan)

    assert [e.split(":")[0] for e in result.errors] == [
        "Failed to rename a.txt",
        "Cannot rename b.txt",
        "Failed to rename c.txt",
    ]


def test_progress_callback_is_called_per_entry(make_files):
    files = make_files("a.txt", "b.txt")
    plan = plan_pattern_rename(files, PatternRule(suffix="_x"))
    calls = []

    execute_rename(plan, progress_callback=lambda cur, total, msg: calls.append((cur, total)))

    assert calls == [(1, 2), (2, 2)]


def test_empty_plan_is_success():
    result = execute_rename(RenamePlan())
    assert result.ok
    assert result.renamed == []

