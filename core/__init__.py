"""
core - Batch Rename Tool Core Module

Provides core functionalities such as file collection, rename plan generation, execution, etc.
"""

from .models_fs import (
    FileEntry,
    PatternRule,
    CaseMode,
    ExternalNames,
    RenamePlanEntry,
    RenamePlan,
    BatchResult,
)

from .errors import (
    RenameError,
    ValidationError,
    CountMismatch,
    CollisionExhausted,
)

from .scan_files import (
    collect_files,
    walk_directory,
    revalidate_files,
)

from .text_match import (
    matches_pattern,
    replace_text,
    apply_case,
    transform_name,
    candidate_name,
)

from .plan_rename import (
    plan_pattern_rename,
    plan_external_rename,
    plan_rename,
    ConflictResolver,
    MAX_PROBES,
    is_case_alias,
)

from .exec_rename import (
    execute_rename,
)

from .batch_ops import (
    plan_and_apply_pattern_rename,
    plan_and_apply_external_rename,
)

__all__ = [
    # Data models
    "FileEntry",
    "PatternRule",
    "CaseMode",
    "ExternalNames",
    "RenamePlanEntry",
    "RenamePlan",
    "BatchResult",

    # Errors
    "RenameError",
    "ValidationError",
    "CountMismatch",
    "CollisionExhausted",

    # Scanning
    "collect_files",
    "walk_directory",
    "revalidate_files",

    # Text processing
    "matches_pattern",
    "replace_text",
    "apply_case",
    "transform_name",
    "candidate_name",

    # Planning
    "plan_pattern_rename",
    "plan_external_rename",
    "plan_rename",
    "ConflictResolver",
    "MAX_PROBES",
    "is_case_alias",

    # Execution
    "execute_rename",
    "plan_and_apply_pattern_rename",
    "plan_and_apply_external_rename",
]
