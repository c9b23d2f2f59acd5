"""
gui_workers.py - GUI Worker Threads

Provides background execution of long tasks to avoid blocking UI
"""

from pathlib import Path
from typing import Optional, List, Union

from PySide6.QtCore import QThread, Signal, QObject

from core import (
    collect_files, plan_rename, execute_rename,
    FileEntry, PatternRule, RenamePlan,
)
from ai import AIConfig, generate_names, list_models


class CollectWorker(QThread):
    """File collection worker thread"""

    # Signals
    finished = Signal(list)         # Complete, returns FileEntry list
    error = Signal(str)             # Error message

    def __init__(
        self,
        paths: List[Union[str, Path]],
        recursive: bool = False,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.paths = paths
        self.recursive = recursive

    def run(self):
        try:
            self.finished.emit(collect_files(self.paths, recursive=self.recursive))
        except Exception as e:
            self.error.emit(str(e))


class PlanWorker(QThread):
    """Rename plan generation worker thread"""

    # Signals
    finished = Signal(object)           # RenamePlan
    error = Signal(str)                 # Error message

    def __init__(
        self,
        files: List[FileEntry],
        rule: Union[PatternRule, List[str]],
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.files = files
        self.rule = rule

    def run(self):
        try:
            self.finished.emit(plan_rename(self.files, self.rule))
        except Exception as e:
            self.error.emit(str(e))


class RenameWorker(QThread):
    """Rename execution worker thread"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # BatchResult
    error = Signal(str)                 # Error message

    def __init__(self, plan: RenamePlan, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.plan = plan

    def run(self):
        try:
            def progress_callback(current: int, total: int, msg: str):
                self.progress.emit(current, total, msg)

            result = execute_rename(self.plan, progress_callback=progress_callback)
            self.finished.emit(result)
        except Exception as e:
            self.error.emit(str(e))


class GenerateWorker(QThread):
    """AI name generation worker thread"""

    # Signals
    finished = Signal(list)             # New stems
    error = Signal(str)                 # Error message

    def __init__(
        self,
        files: List[FileEntry],
        instruction: str,
        config: AIConfig,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.files = files
        self.instruction = instruction
        self.config = config

    def run(self):
        try:
            self.finished.emit(generate_names(self.files, self.instruction, self.config))
        except Exception as e:
            self.error.emit(str(e))


class ModelsWorker(QThread):
    """Model list worker thread"""

    # Signals
    finished = Signal(list)             # ModelInfo list
    error = Signal(str)                 # Error message

    def __init__(self, config: AIConfig, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.config = config

    def run(self):
        try:
            self.finished.emit(list_models(self.config))
        except Exception as e:
            self.error.emit(str(e))
