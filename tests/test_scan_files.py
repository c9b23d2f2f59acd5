#!/usr/bin/env python3
"""
Tests for turning picked paths into file entries.
"""

from core import FileEntry, collect_files, revalidate_files, walk_directory


def _tree(tmp_path):
    (tmp_path / "top.txt").write_text("x")
    sub = tmp_path / "folder"
    (sub / "deep").mkdir(parents=True)
    (sub / "one.txt").write_text("x")
    (sub / "deep" / "two.txt").write_text("x")
    return sub


def test_file_entry_fields(tmp_path):
    entry = FileEntry.from_path(tmp_path / "photo.tar.gz")
    assert entry.directory == tmp_path
    assert entry.name == "photo.tar.gz"
    assert entry.stem == "photo.tar"
    assert entry.suffix == ".gz"


def test_walk_directory_lists_files_only(tmp_path):
    sub = _tree(tmp_path)
    names = [f.name for f in walk_directory(sub)]
    assert names == ["one.txt", "two.txt"]


def test_collect_skips_directories_without_recursion(tmp_path):
    sub = _tree(tmp_path)
    files = collect_files([tmp_path / "top.txt", sub])
    assert [f.name for f in files] == ["top.txt"]


def test_collect_expands_directories_with_recursion(tmp_path):
    sub = _tree(tmp_path)
    files = collect_files([str(tmp_path / "top.txt"), str(sub)], recursive=True)
    assert [f.name for f in files] == ["top.txt", "one.txt", "two.txt"]
    assert files[2].directory == sub / "deep"


def test_collect_ignores_blank_and_missing_paths(tmp_path):
    (tmp_path / "a.txt").write_text("x")
    files = collect_files(["", "   ", str(tmp_path / "missing.txt"), f"  {tmp_path / 'a.txt'}  "])
    assert [f.name for f in files] == ["a.txt"]


def test_revalidate_drops_deleted_files(tmp_path):
    (tmp_path / "a.txt").write_text("x")
    (tmp_path / "b.txt").write_text("x")
    files = collect_files([tmp_path / "a.txt", tmp_path / "b.txt"])
    (tmp_path / "a.txt").unlink()
    assert [f.name for f in revalidate_files(files)] == ["b.txt"]
