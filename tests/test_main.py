#!/usr/bin/env python3
"""
Tests for the launcher flags in main.py.
"""

import sys

import main as launcher


def test_only_leading_flags_are_taken():
    flags, rest = launcher.split_launcher_flags(["-v", "--cli", "ai", "a.txt", "--prompt", "-v"])
    assert flags == {"-v", "--cli"}
    assert rest == ["ai", "a.txt", "--prompt", "-v"]


def test_flags_after_a_subcommand_stay_in_place():
    flags, rest = launcher.split_launcher_flags(["rule", "a.txt", "-c"])
    assert flags == set()
    assert rest == ["rule", "a.txt", "-c"]


def test_cli_mode_passes_remaining_arguments(tmp_path, monkeypatch):
    (tmp_path / "a.txt").write_text("x")
    monkeypatch.setattr(sys, "argv", [
        "main.py", "-c", "-v", "rule", str(tmp_path / "a.txt"), "--prefix=-v", "--yes",
    ])

    assert launcher.main() == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == ["-va.txt"]
