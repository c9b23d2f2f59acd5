"""
scan_files.py - File Collection Module

Turns picked or dropped paths into FileEntry lists, optionally walking folders
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Union

from .models_fs import FileEntry

logger = logging.getLogger(__name__)


def walk_directory(root: Union[str, Path]) -> List[FileEntry]:
    """
    Recursively list every non-directory file under root

    Unreadable subdirectories are skipped.

    Args:
        root: Root directory

    Returns:
        File list in walk order
    """
    results: List[FileEntry] = []

    def on_error(e: OSError) -> None:
        logger.debug("Skipping %s: %s", e.filename, e)

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        # Deterministic order across platforms
        dirnames.sort()
        for filename in sorted(filenames):
            results.append(FileEntry.from_path(Path(dirpath) / filename))

    return results


def collect_files(paths: Iterable[Union[str, Path]], recursive: bool = False) -> List[FileEntry]:
    """
    Build the batch file list from picked paths

    Args:
        paths: Files and/or folders
        recursive: Expand folders into all files below them; when False folders are skipped

    Returns:
        File list (missing or blank paths are ignored)
    """
    files: List[FileEntry] = []

    for raw in paths:
        text = str(raw).strip()
        if not text:
            continue

        path = Path(text)
        try:
            is_dir = path.is_dir()
            exists = is_dir or path.exists()
        except OSError:
            continue
        if not exists:
            logger.debug("Ignoring missing path: %s", path)
            continue

        if is_dir:
            if recursive:
                files.extend(walk_directory(path))
            continue

        files.append(FileEntry.from_path(path))

    return files


def revalidate_files(entries: Iterable[FileEntry]) -> List[FileEntry]:
    """Keep only entries whose file still exists"""
    return [f for f in entries if f.full_path.exists()]
