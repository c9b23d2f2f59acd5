"""
errors.py - Rename Error Types

Validation errors abort a whole batch before anything is touched;
CollisionExhausted only ever affects a single file.
"""


class RenameError(Exception):
    """Base class for rename errors"""


class ValidationError(RenameError):
    """Batch input is invalid, nothing has been renamed"""


class CountMismatch(ValidationError):
    """Number of proposed names differs from number of files"""

    def __init__(self, files_count: int, names_count: int):
        self.files_count = files_count
        self.names_count = names_count
        super().__init__(
            f"File count ({files_count}) does not match new name count ({names_count})"
        )


class CollisionExhausted(RenameError):
    """No free target name was found within the attempt limit"""

    def __init__(self, name: str, attempts: int):
        self.name = name
        self.attempts = attempts
        super().__init__(f"Cannot rename {name}: target exists (tried {attempts} names)")
