#!/usr/bin/env python3
"""
End-to-end scenarios for plan-and-apply.
"""

import os

import pytest

from core import (
    CaseMode, CountMismatch, PatternRule,
    plan_and_apply_external_rename, plan_and_apply_pattern_rename,
)


def _names(directory):
    return sorted(p.name for p in directory.iterdir())


def test_prefix_rename(make_files, tmp_path):
    files = make_files("a.txt", "b.txt")
    result = plan_and_apply_pattern_rename(files, PatternRule(prefix="new_"))
    assert result.ok
    assert _names(tmp_path) == ["new_a.txt", "new_b.txt"]


def test_prefix_rename_with_existing_target(make_files, tmp_path):
    files = make_files("a.txt", "b.txt", "new_a.txt")[:2]
    result = plan_and_apply_pattern_rename(files, PatternRule(prefix="new_"))
    assert result.ok
    assert _names(tmp_path) == ["new_a.txt", "new_a_1.txt", "new_b.txt"]
    assert (tmp_path / "new_a_1.txt").read_text() == "a.txt"


def test_hardlinked_target_is_not_treated_as_source(make_files, tmp_path):
    files = make_files("a.txt")
    os.link(files[0].full_path, tmp_path / "new_a.txt")

    result = plan_and_apply_pattern_rename(files, PatternRule(prefix="new_"))

    assert result.ok
    assert _names(tmp_path) == ["new_a.txt", "new_a_1.txt"]


def test_symlinked_target_is_not_replaced(make_files, tmp_path):
    files = make_files("a.txt")
    link = tmp_path / "new_a.txt"
    os.symlink(files[0].full_path, link)

    result = plan_and_apply_pattern_rename(files, PatternRule(prefix="new_"))

    assert result.ok
    assert link.is_symlink()
    assert (tmp_path / "new_a_1.txt").read_text() == "a.txt"


def test_upper_case_includes_extension_unchanged(make_files, tmp_path):
    files = make_files("x.jpg")
    result = plan_and_apply_pattern_rename(files, PatternRule(case_mode=CaseMode.UPPER))
    assert result.ok
    assert _names(tmp_path) == ["X.jpg"]


def test_upper_case_of_upper_extension(make_files, tmp_path):
    files = make_files("x.JPG")
    plan_and_apply_pattern_rename(files, PatternRule(case_mode=CaseMode.UPPER))
    assert _names(tmp_path) == ["X.JPG"]


def test_external_names(make_files, tmp_path):
    files = make_files("f1.png", "f2.png")
    result = plan_and_apply_external_rename(files, ["报告", "总结"])
    assert result.ok
    assert _names(tmp_path) == sorted(["报告.png", "总结.png"])


def test_external_count_mismatch_changes_nothing(make_files, tmp_path):
    files = make_files("f1.png", "f2.png")
    before = _names(tmp_path)
    with pytest.raises(CountMismatch):
        plan_and_apply_external_rename(files, ["a", "b", "c"])
    assert _names(tmp_path) == before


def test_glob_leaves_other_files_untouched(make_files, tmp_path):
    files = make_files("a.txt", "b.jpg")
    result = plan_and_apply_pattern_rename(files, PatternRule(pattern="*.txt", suffix="_done"))
    assert result.ok
    assert result.renamed[0].source.name == "a.txt"
    assert len(result.renamed) == 1
    assert _names(tmp_path) == ["a_done.txt", "b.jpg"]


def test_noop_rule_renames_nothing(make_files, tmp_path):
    files = make_files("a.txt")
    result = plan_and_apply_pattern_rename(files, PatternRule())
    assert result.ok
    assert result.renamed == []
    assert _names(tmp_path) == ["a.txt"]


def test_files_in_different_directories_stay_put(make_files, tmp_path):
    files = make_files("one/a.txt", "two/a.txt")
    result = plan_and_apply_pattern_rename(files, PatternRule(prefix="z_"))
    assert result.ok
    assert (tmp_path / "one" / "z_a.txt").exists()
    assert (tmp_path / "two" / "z_a.txt").exists()
