"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Generate preliminary target names (pattern rule / external names)
- Conflict detection and resolution (auto add _1, _2...)
- Output RenamePlan
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Set, Sequence, Union

from .errors import CollisionExhausted, CountMismatch, ValidationError
from .models_fs import FileEntry, PatternRule, RenamePlan
from .text_match import matches_pattern, transform_name

logger = logging.getLogger(__name__)

# Desired name plus _1 .. _999
MAX_PROBES = 1000


def is_case_alias(path, source) -> bool:
    """
    Whether path is the source file itself, spelled with different case

    Hardlinks and symlinks to the source are other directory entries and
    do not count, even though they resolve to the same file.
    """
    path, source = Path(path), Path(source)
    if path.parent != source.parent or path.name.lower() != source.name.lower():
        return False
    if os.path.islink(path):
        return False
    try:
        # A separate entry with exactly this spelling is another link
        if path.name != source.name and path.name in os.listdir(path.parent):
            return False
        return os.path.samefile(path, source)
    except OSError:
        return False


class ConflictResolver:
    """Conflict resolver"""

    def __init__(self, max_probes: int = MAX_PROBES):
        """
        Initialize conflict resolver

        Args:
            max_probes: Total number of candidate names tried per file
        """
        self.max_probes = max_probes
        # Targets already handed out in this batch
        self.claimed: Set[Path] = set()

    def is_occupied(self, path: Path, source: Optional[Path] = None) -> bool:
        """Check if path exists on disk or is claimed by an earlier entry"""
        if path in self.claimed:
            return True
        if not os.path.lexists(path):
            return False
        return source is None or not is_case_alias(path, source)

    def resolve(
        self,
        directory: Path,
        stem: str,
        suffix: str,
        source: Optional[Path] = None
    ) -> Path:
        """
        Resolve conflict, return available path

        Args:
            directory: Directory
            stem: Desired filename without suffix
            suffix: File extension
            source: File being renamed, never counted as a collision with itself

        Returns:
            Free path in directory

        Raises:
            CollisionExhausted: max_probes names were all occupied
        """
        candidate = directory / f"{stem}{suffix}"
        n = 1
        while self.is_occupied(candidate, source):
            if n >= self.max_probes:
                raise CollisionExhausted(f"{stem}{suffix}", self.max_probes)
            candidate = directory / f"{stem}_{n}{suffix}"
            n += 1

        self.claimed.add(candidate)
        return candidate


def _plan_one(
    plan: RenamePlan,
    resolver: ConflictResolver,
    index: int,
    f: FileEntry,
    new_stem: str
) -> None:
    """Resolve one file's target and add it to the plan"""
    desired = f.directory / f"{new_stem}{f.suffix}"

    # Skip if name hasn't changed
    if desired == f.full_path:
        return

    try:
        target = resolver.resolve(f.directory, new_stem, f.suffix, source=f.full_path)
    except CollisionExhausted as e:
        logger.debug("No free name for %s: %s", f.full_path, e)
        plan.add_failure(index, f"Cannot rename {f.name}: target file already exists")
        return

    if target == f.full_path:
        return

    note = ""
    if target != desired:
        note = f"conflict resolved: {desired.name} -> {target.name}"
        logger.debug("%s: %s", f.full_path, note)

    plan.add_entry(f, target, index, note)


def plan_pattern_rename(files: Sequence[FileEntry], rule: PatternRule) -> RenamePlan:
    """
    Generate rule-based rename plan

    Args:
        files: File list (order is kept)
        rule: Rename rule

    Returns:
        Rename plan
    """
    plan = RenamePlan()
    resolver = ConflictResolver()

    ordinal = 0
    for index, f in enumerate(files):
        if not matches_pattern(f.name, rule.pattern):
            continue

        new_stem = transform_name(f.stem, f.suffix, rule, ordinal)
        ordinal += 1
        _plan_one(plan, resolver, index, f, new_stem)

    return plan


def _check_external_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("New filename cannot be empty")
    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in name for sep in separators):
        raise ValidationError(f"New filename cannot contain a path separator: {name}")


def plan_external_rename(files: Sequence[FileEntry], names: Sequence[str]) -> RenamePlan:
    """
    Generate rename plan from externally generated names

    Args:
        files: File list
        names: New stems (no extension), one per file in the same order

    Returns:
        Rename plan

    Raises:
        CountMismatch: len(names) != len(files)
        ValidationError: A name is empty or contains a path separator
    """
    if len(names) != len(files):
        raise CountMismatch(len(files), len(names))
    for name in names:
        _check_external_name(name)

    plan = RenamePlan()
    resolver = ConflictResolver()

    for index, (f, name) in enumerate(zip(files, names)):
        _plan_one(plan, resolver, index, f, name)

    return plan


def plan_rename(
    files: Sequence[FileEntry],
    rule: Union[PatternRule, List[str]]
) -> RenamePlan:
    """Generate a plan for either kind of rule"""
    if isinstance(rule, PatternRule):
        return plan_pattern_rename(files, rule)
    return plan_external_rename(files, rule)
