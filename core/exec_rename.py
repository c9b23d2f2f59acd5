"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Apply plan entries one by one
- Collect per-file errors without aborting the batch

Renames are not transactional: a failure or crash mid-batch leaves the
files renamed so far in place, there is no rollback.
"""

import logging
import os
from typing import Callable, List, Optional, Tuple

from .models_fs import BatchResult, RenamePlan
from .plan_rename import is_case_alias

logger = logging.getLogger(__name__)


def execute_rename(
    plan: RenamePlan,
    progress_callback: Optional[Callable[[int, int, str], None]] = None
) -> BatchResult:
    """
    Execute rename plan

    Args:
        plan: Rename plan
        progress_callback: Progress callback (current, total, message)

    Returns:
        Execution result; planning failures are merged into its errors
    """
    result = BatchResult()
    errors: List[Tuple[int, str]] = list(plan.failures)
    total = len(plan.entries)

    for i, entry in enumerate(plan.entries):
        src = entry.source.full_path
        dst = entry.target

        if progress_callback:
            progress_callback(i + 1, total, f"{entry.source.name} -> {dst.name}")

        # Target created by someone else since planning; os.rename would overwrite it
        if os.path.lexists(dst) and not is_case_alias(dst, src):
            msg = f"Failed to rename {entry.source.name}: target {dst.name} already exists"
            logger.warning(msg)
            errors.append((entry.index, msg))
            continue

        try:
            os.rename(src, dst)
        except OSError as e:
            msg = f"Failed to rename {entry.source.name}: {e}"
            logger.warning(msg)
            errors.append((entry.index, msg))
            continue

        result.renamed.append(entry)

    errors.sort(key=lambda item: item[0])
    result.errors = [msg for _, msg in errors]

    logger.info("Renamed %d files, %d failed", result.success_count, result.failed_count)
    return result
