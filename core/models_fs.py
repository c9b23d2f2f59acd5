"""
models_fs.py - Core Data Structure Definitions

Contains:
- FileEntry: One file on disk at plan time
- PatternRule: Rule-based rename settings
- RenamePlanEntry: Single resolved rename operation
- RenamePlan: Batch rename plan
- BatchResult: Execution result of a batch
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union
from enum import Enum


class CaseMode(Enum):
    """Case transform enumeration"""
    NONE = ""            # Keep as is
    LOWER = "lower"      # lowercase all
    UPPER = "upper"      # UPPERCASE ALL
    TITLE = "title"      # First character upper, rest lower

    @classmethod
    def parse(cls, value: str) -> "CaseMode":
        """Parse a case mode name ("none" and "" both mean no change)"""
        value = (value or "").strip().lower()
        if value == "none":
            return cls.NONE
        return cls(value)


@dataclass(frozen=True)
class FileEntry:
    """File information data class"""
    directory: Path                 # Parent directory
    name: str                       # Filename (with suffix)
    full_path: Path                 # Full path

    @classmethod
    def from_path(cls, p: Union[str, Path]) -> "FileEntry":
        """Create FileEntry from a path"""
        p = Path(p)
        return cls(directory=p.parent, name=p.name, full_path=p)

    @property
    def stem(self) -> str:
        """Filename without suffix"""
        return Path(self.name).stem

    @property
    def suffix(self) -> str:
        """Suffix including the dot (e.g., .png), empty if none"""
        return Path(self.name).suffix


@dataclass
class PatternRule:
    """Rule-based rename settings"""
    pattern: str = ""               # Glob filter on the filename, "" or "*" means all
    replace_from: str = ""          # Substring to replace
    replace_to: str = ""            # Replacement (may be empty)
    prefix: str = ""
    suffix: str = ""                # Appended to the stem (not the file extension)
    case_mode: CaseMode = CaseMode.NONE
    number_start: int = 0           # Numbering is enabled when start or step is non-zero
    number_step: int = 0            # 0 still counts up by one

    @property
    def numbering_enabled(self) -> bool:
        return self.number_start != 0 or self.number_step != 0


# Externally generated names, positionally matched to the input files
ExternalNames = List[str]


@dataclass
class RenamePlanEntry:
    """Single rename operation"""
    source: FileEntry               # File to rename
    target: Path                    # Destination path (same directory)
    index: int = 0                  # Position of source in the input list
    note: str = ""                  # Note (e.g., conflict resolution explanation)

    @property
    def is_case_only_change(self) -> bool:
        """Whether it's only a case change"""
        return (self.source.name.lower() == self.target.name.lower() and
                self.source.name != self.target.name)


@dataclass
class RenamePlan:
    """Batch rename plan"""
    entries: List[RenamePlanEntry] = field(default_factory=list)
    failures: List[Tuple[int, str]] = field(default_factory=list)  # (index, message)

    @property
    def conflict_count(self) -> int:
        """Number of conflict resolutions"""
        return sum(1 for e in self.entries if e.note.startswith("conflict resolved"))

    @property
    def total_count(self) -> int:
        """Total number of operations"""
        return len(self.entries)

    def add_entry(self, source: FileEntry, target: Path, index: int, note: str = "") -> None:
        """Add operation"""
        self.entries.append(RenamePlanEntry(source=source, target=target, index=index, note=note))

    def add_failure(self, index: int, msg: str) -> None:
        """Record a file that could not be planned"""
        self.failures.append((index, msg))

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Rename Plan Summary:",
            f"  - Total operations: {self.total_count}",
            f"  - Conflict resolutions: {self.conflict_count}",
            f"  - Unresolvable: {len(self.failures)}",
        ]
        return "\n".join(lines)


@dataclass
class BatchResult:
    """Rename execution result"""
    errors: List[str] = field(default_factory=list)     # One message per failing file, input order
    renamed: List[RenamePlanEntry] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def success_count(self) -> int:
        return len(self.renamed)

    @property
    def failed_count(self) -> int:
        return len(self.errors)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Execution Result:",
            f"  - Success: {self.success_count}",
            f"  - Failed: {self.failed_count}",
        ]
        if self.errors:
            lines.append("Failure Details:")
            for error in self.errors[:10]:  # Show at most 10
                lines.append(f"  - {error}")
            if len(self.errors) > 10:
                lines.append(f"  ... and {len(self.errors) - 10} more failures")
        return "\n".join(lines)
