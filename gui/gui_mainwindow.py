"""
gui_mainwindow.py - GUI Main Window

File list shared by two tabs:
1. Rule Rename
2. AI Rename
"""

from pathlib import Path
from typing import Optional, List, Union

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QTabWidget, QLabel, QLineEdit, QPushButton, QCheckBox, QComboBox,
    QSpinBox, QTableWidget, QTableWidgetItem, QTextEdit, QProgressBar,
    QFileDialog, QMessageBox, QHeaderView, QGroupBox, QInputDialog
)
from PySide6.QtCore import Slot, Signal
from PySide6.QtGui import QColor, QAction

from core import (
    FileEntry, PatternRule, CaseMode, RenamePlan, BatchResult,
    revalidate_files,
)
from ai import (
    AIConfig, ConfigError, PromptTemplate, load_config, save_config,
    load_templates, save_templates, find_template,
)
from .gui_workers import CollectWorker, PlanWorker, RenameWorker, GenerateWorker
from .gui_settings import SettingsDialog


class RuleTab(QWidget):
    """Rule Rename Tab"""

    preview_requested = Signal(object)  # PatternRule

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QGridLayout(self)

        layout.addWidget(QLabel("Match Pattern:"), 0, 0)
        self.pattern_edit = QLineEdit()
        self.pattern_edit.setPlaceholderText("e.g., *.txt (leave empty to match all files)")
        layout.addWidget(self.pattern_edit, 0, 1, 1, 3)

        layout.addWidget(QLabel("Find:"), 1, 0)
        self.from_edit = QLineEdit()
        self.from_edit.setPlaceholderText("String to replace")
        layout.addWidget(self.from_edit, 1, 1)
        layout.addWidget(QLabel("Replace with:"), 1, 2)
        self.to_edit = QLineEdit()
        self.to_edit.setPlaceholderText("Leave empty to delete")
        layout.addWidget(self.to_edit, 1, 3)

        layout.addWidget(QLabel("Prefix:"), 2, 0)
        self.prefix_edit = QLineEdit()
        layout.addWidget(self.prefix_edit, 2, 1)
        layout.addWidget(QLabel("Suffix:"), 2, 2)
        self.suffix_edit = QLineEdit()
        self.suffix_edit.setPlaceholderText("Before the extension")
        layout.addWidget(self.suffix_edit, 2, 3)

        layout.addWidget(QLabel("Case:"), 3, 0)
        self.case_combo = QComboBox()
        self.case_combo.addItem("No Change", CaseMode.NONE)
        self.case_combo.addItem("lowercase", CaseMode.LOWER)
        self.case_combo.addItem("UPPERCASE", CaseMode.UPPER)
        self.case_combo.addItem("First letter upper", CaseMode.TITLE)
        layout.addWidget(self.case_combo, 3, 1)

        number_layout = QHBoxLayout()
        number_layout.addWidget(QLabel("Number Start:"))
        self.start_spin = QSpinBox()
        self.start_spin.setRange(0, 999999)
        self.start_spin.setSpecialValueText("Off")
        number_layout.addWidget(self.start_spin)
        number_layout.addWidget(QLabel("Step:"))
        self.step_spin = QSpinBox()
        self.step_spin.setRange(0, 9999)
        number_layout.addWidget(self.step_spin)
        layout.addLayout(number_layout, 3, 2, 1, 2)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(lambda: self.preview_requested.emit(self.rule()))
        layout.addWidget(self.preview_btn, 4, 0, 1, 4)

    def rule(self) -> PatternRule:
        return PatternRule(
            pattern=self.pattern_edit.text().strip(),
            replace_from=self.from_edit.text(),
            replace_to=self.to_edit.text(),
            prefix=self.prefix_edit.text(),
            suffix=self.suffix_edit.text(),
            case_mode=self.case_combo.currentData(),
            number_start=self.start_spin.value(),
            number_step=self.step_spin.value(),
        )


class AITab(QWidget):
    """AI Rename Tab"""

    generate_requested = Signal(str)    # instruction
    save_template_requested = Signal(str)    # instruction
    settings_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        top = QHBoxLayout()
        top.addWidget(QLabel("Template:"))
        self.template_combo = QComboBox()
        self.template_combo.activated.connect(self._apply_template)
        top.addWidget(self.template_combo, 1)
        self.settings_btn = QPushButton("AI Settings...")
        self.settings_btn.clicked.connect(self.settings_requested)
        top.addWidget(self.settings_btn)
        layout.addLayout(top)

        self.prompt_edit = QTextEdit()
        self.prompt_edit.setPlaceholderText("Describe how the files should be named...")
        self.prompt_edit.setMaximumHeight(90)
        layout.addWidget(self.prompt_edit)

        self.generate_btn = QPushButton("Generate Names")
        self.generate_btn.clicked.connect(
            lambda: self.generate_requested.emit(self.prompt_edit.toPlainText().strip())
        )
        self.save_template_btn = QPushButton("Save as Template...")
        self.save_template_btn.clicked.connect(
            lambda: self.save_template_requested.emit(self.prompt_edit.toPlainText().strip())
        )
        buttons = QHBoxLayout()
        buttons.addWidget(self.generate_btn, 1)
        buttons.addWidget(self.save_template_btn)
        layout.addLayout(buttons)

    def set_templates(self, templates) -> None:
        self.template_combo.clear()
        for t in templates:
            self.template_combo.addItem(t.name, t.content)

    def _apply_template(self, index: int):
        content = self.template_combo.itemData(index)
        if content:
            self.prompt_edit.setPlainText(content)


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("File Renaming")
        self.setMinimumSize(900, 650)
        self.setAcceptDrops(True)

        self.files: List[FileEntry] = []
        self.plan: Optional[RenamePlan] = None
        self.config = AIConfig()
        self.collect_worker: Optional[CollectWorker] = None
        self.plan_worker: Optional[PlanWorker] = None
        self.rename_worker: Optional[RenameWorker] = None
        self.generate_worker: Optional[GenerateWorker] = None

        self._init_ui()
        self._load_settings()

    def _init_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        settings_action = QAction("AI Settings...", self)
        settings_action.triggered.connect(self._open_settings)
        self.menuBar().addMenu("Settings").addAction(settings_action)

        # File selection group
        files_group = QGroupBox("Files (drag and drop supported)")
        files_layout = QHBoxLayout(files_group)
        self.add_files_btn = QPushButton("Add Files...")
        self.add_files_btn.clicked.connect(self._browse_files)
        files_layout.addWidget(self.add_files_btn)
        self.add_folder_btn = QPushButton("Add Folder...")
        self.add_folder_btn.clicked.connect(self._browse_folder)
        files_layout.addWidget(self.add_folder_btn)
        self.recursive_check = QCheckBox("Include Subfolders")
        self.recursive_check.setChecked(True)
        files_layout.addWidget(self.recursive_check)
        files_layout.addStretch()
        self.clear_btn = QPushButton("Clear")
        self.clear_btn.clicked.connect(self._clear_files)
        files_layout.addWidget(self.clear_btn)
        layout.addWidget(files_group)

        # Tabs
        self.tabs = QTabWidget()
        self.rule_tab = RuleTab()
        self.rule_tab.preview_requested.connect(self._do_preview)
        self.ai_tab = AITab()
        self.ai_tab.generate_requested.connect(self._do_generate)
        self.ai_tab.save_template_requested.connect(self._save_template)
        self.ai_tab.settings_requested.connect(self._open_settings)
        self.tabs.addTab(self.rule_tab, "Rule Rename")
        self.tabs.addTab(self.ai_tab, "AI Rename")
        layout.addWidget(self.tabs)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status", "Folder"])
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(3, QHeaderView.ResizeMode.Stretch)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Execute Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        self.statusBar().showMessage("Ready")

    def _load_settings(self):
        """Load AI config and prompt templates"""
        try:
            self.config = load_config()
        except ConfigError as e:
            QMessageBox.warning(self, "Warning", str(e))
        try:
            self.ai_tab.set_templates(load_templates())
        except ConfigError as e:
            QMessageBox.warning(self, "Warning", str(e))

    def _set_busy(self, busy: bool, message: str = ""):
        for widget in (self.add_files_btn, self.add_folder_btn, self.clear_btn,
                       self.rule_tab.preview_btn, self.ai_tab.generate_btn):
            widget.setEnabled(not busy)
        if busy:
            self.execute_btn.setEnabled(False)
            self.progress_bar.setVisible(True)
            self.progress_bar.setRange(0, 0)  # Indeterminate progress
        else:
            self.progress_bar.setVisible(False)
        if message:
            self.statusBar().showMessage(message)

    # ---- File list ----

    def _browse_files(self):
        paths, _ = QFileDialog.getOpenFileNames(self, "Select Files", "", "All Files (*)")
        if paths:
            self._add_paths(paths)

    def _browse_folder(self):
        directory = QFileDialog.getExistingDirectory(self, "Select Folder")
        if directory:
            self._add_paths([directory])

    def dragEnterEvent(self, event):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()

    def dropEvent(self, event):
        paths = [url.toLocalFile() for url in event.mimeData().urls() if url.isLocalFile()]
        if paths:
            self._add_paths(paths)

    def _add_paths(self, paths: List[Union[str, Path]]):
        self._set_busy(True, "Collecting files...")
        self.collect_worker = CollectWorker(paths, recursive=self.recursive_check.isChecked())
        self.collect_worker.finished.connect(self._on_collect_finished)
        self.collect_worker.error.connect(self._on_worker_error)
        self.collect_worker.start()

    @Slot(list)
    def _on_collect_finished(self, files: List[FileEntry]):
        known = {f.full_path for f in self.files}
        self.files.extend(f for f in files if f.full_path not in known)
        self.plan = None
        self._set_busy(False, f"{len(self.files)} files")
        self._update_table_files()

    def _clear_files(self):
        self.files = []
        self.plan = None
        self.execute_btn.setEnabled(False)
        self.table.setRowCount(0)
        self.statusBar().showMessage("Ready")

    def _update_table_files(self):
        """Update table to display the file list"""
        self.table.setRowCount(len(self.files))
        for i, f in enumerate(self.files):
            self.table.setItem(i, 0, QTableWidgetItem(f.name))
            self.table.setItem(i, 1, QTableWidgetItem(""))  # New filename pending preview
            self.table.setItem(i, 2, QTableWidgetItem(""))
            self.table.setItem(i, 3, QTableWidgetItem(str(f.directory)))

    # ---- Planning ----

    def _require_files(self) -> bool:
        if not self.files:
            QMessageBox.warning(self, "Warning", "Please add files first")
            return False
        return True

    @Slot(object)
    def _do_preview(self, rule: Union[PatternRule, List[str]]):
        """Generate preview"""
        if not self._require_files():
            return
        self._set_busy(True, "Generating rename plan...")
        self.plan_worker = PlanWorker(list(self.files), rule)
        self.plan_worker.finished.connect(self._on_plan_finished)
        self.plan_worker.error.connect(self._on_worker_error)
        self.plan_worker.start()

    @Slot(str)
    def _do_generate(self, instruction: str):
        """Ask the AI for new names"""
        if not self._require_files():
            return
        if not instruction:
            QMessageBox.warning(self, "Warning", "Please enter a prompt")
            return
        if not self.config.api_key:
            QMessageBox.warning(self, "Warning", "Please set the AI API key first")
            self._open_settings()
            return

        self._set_busy(True, f"Asking {self.config.effective_model()} for new names...")
        self.generate_worker = GenerateWorker(list(self.files), instruction, self.config)
        self.generate_worker.finished.connect(self._on_generate_finished)
        self.generate_worker.error.connect(self._on_worker_error)
        self.generate_worker.start()

    @Slot(list)
    def _on_generate_finished(self, names: List[str]):
        self._set_busy(False)
        self._do_preview(names)

    @Slot(object)
    def _on_plan_finished(self, plan: RenamePlan):
        """Plan generation complete"""
        self.plan = plan
        self._set_busy(False)
        self._update_table_preview()

        if plan.entries:
            self.execute_btn.setEnabled(True)
            self.statusBar().showMessage(
                f"Will perform {plan.total_count} rename operations (conflict resolutions: {plan.conflict_count})"
            )
        else:
            self.statusBar().showMessage("No files need renaming")

    def _update_table_preview(self):
        """Update table to display preview results"""
        if not self.plan:
            return

        entry_map = {e.index: e for e in self.plan.entries}
        failure_map = dict(self.plan.failures)

        for i, f in enumerate(self.files):
            entry = entry_map.get(i)
            if entry:
                new_name_item = QTableWidgetItem(entry.target.name)
                if entry.note:
                    # Conflict resolution
                    new_name_item.setBackground(QColor(255, 255, 200))
                    status_item = QTableWidgetItem("Conflict Resolved")
                    status_item.setForeground(QColor(200, 150, 0))
                elif entry.is_case_only_change:
                    status_item = QTableWidgetItem("Case Change")
                    status_item.setForeground(QColor(0, 120, 200))
                else:
                    status_item = QTableWidgetItem("Will Rename")
                    status_item.setForeground(QColor(0, 150, 0))
            elif i in failure_map:
                new_name_item = QTableWidgetItem("")
                status_item = QTableWidgetItem("Cannot Rename")
                status_item.setForeground(QColor(200, 0, 0))
                status_item.setToolTip(failure_map[i])
            else:
                new_name_item = QTableWidgetItem(f.name)
                status_item = QTableWidgetItem("No Change")
                status_item.setForeground(QColor(150, 150, 150))

            self.table.setItem(i, 1, new_name_item)
            self.table.setItem(i, 2, status_item)

    # ---- Execution ----

    def _do_execute(self):
        """Execute rename"""
        if not self.plan or not self.plan.entries:
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to execute {self.plan.total_count} rename operations?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self._set_busy(True, "Executing...")
        self.progress_bar.setRange(0, self.plan.total_count)

        self.rename_worker = RenameWorker(self.plan)
        self.rename_worker.progress.connect(self._on_rename_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_worker_error)
        self.rename_worker.start()

    @Slot(int, int, str)
    def _on_rename_progress(self, current: int, total: int, msg: str):
        """Execution progress update"""
        self.progress_bar.setValue(current)
        self.statusBar().showMessage(msg)

    @Slot(object)
    def _on_rename_finished(self, result: BatchResult):
        """Execution complete"""
        self._set_busy(False)

        # Point renamed entries at their new names
        renamed = {e.source.full_path: e.target for e in result.renamed}
        self.files = revalidate_files(
            FileEntry.from_path(renamed[f.full_path]) if f.full_path in renamed else f
            for f in self.files
        )
        self.plan = None
        self._update_table_files()

        if result.ok:
            QMessageBox.information(self, "Complete", f"Rename complete!\n\nSuccess: {result.success_count}")
        else:
            msg = f"Some files failed to rename.\n\nSuccess: {result.success_count}\nFailed: {result.failed_count}\n\nFailure Details:\n"
            msg += "\n".join(f"  {error}" for error in result.errors[:5])
            if len(result.errors) > 5:
                msg += f"\n  ... and {len(result.errors) - 5} more failures"
            QMessageBox.warning(self, "Complete", msg)

        self.statusBar().showMessage("Complete")

    @Slot(str)
    def _on_worker_error(self, error: str):
        self._set_busy(False, "")
        self.execute_btn.setEnabled(bool(self.plan and self.plan.entries))
        QMessageBox.critical(self, "Error", error)

    # ---- Settings ----

    def _open_settings(self):
        dialog = SettingsDialog(self.config, self)
        if dialog.exec() != SettingsDialog.DialogCode.Accepted:
            return

        self.config = dialog.config()
        try:
            save_config(self.config)
        except ConfigError as e:
            QMessageBox.critical(self, "Error", str(e))
            return
        self.statusBar().showMessage(f"AI model: {self.config.effective_model()}")

    def _save_template(self, content: str):
        if not content:
            QMessageBox.warning(self, "Warning", "Enter a naming instruction first")
            return
        name, ok = QInputDialog.getText(self, "Save as Template", "Template name:")
        name = name.strip()
        if not ok or not name:
            return

        try:
            templates = load_templates()
        except ConfigError as e:
            QMessageBox.critical(self, "Error", str(e))
            return
        existing = find_template(templates, name)
        if existing is not None:
            existing.content = content
        else:
            templates.append(PromptTemplate(name, content))

        try:
            save_templates(templates)
        except ConfigError as e:
            QMessageBox.critical(self, "Error", str(e))
            return
        self.ai_tab.set_templates(templates)
        self.statusBar().showMessage(f"Saved template: {name}")
