"""
batch_ops.py - Plan and Apply in One Call

Entry points for the GUI and CLI. Three outcomes:
- ValidationError raised: nothing was renamed
- BatchResult with errors: some files failed, the rest were renamed
- BatchResult without errors: everything was renamed
"""

from typing import Callable, Optional, Sequence

from .exec_rename import execute_rename
from .models_fs import BatchResult, FileEntry, PatternRule
from .plan_rename import plan_external_rename, plan_pattern_rename

ProgressCallback = Optional[Callable[[int, int, str], None]]


def plan_and_apply_pattern_rename(
    files: Sequence[FileEntry],
    rule: PatternRule,
    progress_callback: ProgressCallback = None
) -> BatchResult:
    """Rename files with a pattern rule"""
    plan = plan_pattern_rename(files, rule)
    return execute_rename(plan, progress_callback=progress_callback)


def plan_and_apply_external_rename(
    files: Sequence[FileEntry],
    names: Sequence[str],
    progress_callback: ProgressCallback = None
) -> BatchResult:
    """
    Rename files to externally generated names

    Raises:
        CountMismatch: names and files differ in length
        ValidationError: a name is empty or not a plain filename
    """
    plan = plan_external_rename(files, names)
    return execute_rename(plan, progress_callback=progress_callback)
