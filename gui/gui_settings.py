"""
gui_settings.py - AI Settings Dialog
"""

from typing import List, Optional

from PySide6.QtWidgets import (
    QDialog, QFormLayout, QHBoxLayout, QVBoxLayout, QLineEdit, QComboBox,
    QPushButton, QDialogButtonBox, QMessageBox, QLabel
)
from PySide6.QtCore import Slot

from ai import AIConfig, ModelInfo, DEFAULT_BASE_URL, DEFAULT_MODEL
from .gui_workers import ModelsWorker


class SettingsDialog(QDialog):
    """Edit API key, base URL and model"""

    def __init__(self, config: AIConfig, parent=None):
        super().__init__(parent)
        self.setWindowTitle("AI Settings")
        self.setMinimumWidth(480)
        self.models_worker: Optional[ModelsWorker] = None

        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.key_edit = QLineEdit(config.api_key)
        self.key_edit.setEchoMode(QLineEdit.EchoMode.Password)
        self.key_edit.setPlaceholderText("sk-...")
        form.addRow("API Key:", self.key_edit)

        self.url_edit = QLineEdit(config.base_url)
        self.url_edit.setPlaceholderText(DEFAULT_BASE_URL)
        form.addRow("Base URL:", self.url_edit)

        model_layout = QHBoxLayout()
        self.model_combo = QComboBox()
        self.model_combo.setEditable(True)
        self.model_combo.setCurrentText(config.model or DEFAULT_MODEL)
        model_layout.addWidget(self.model_combo, 1)
        self.fetch_btn = QPushButton("Fetch Models")
        self.fetch_btn.clicked.connect(self._fetch_models)
        model_layout.addWidget(self.fetch_btn)
        form.addRow("Model:", model_layout)

        layout.addLayout(form)

        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def config(self) -> AIConfig:
        """Config as currently entered"""
        return AIConfig(
            api_key=self.key_edit.text().strip(),
            base_url=self.url_edit.text().strip(),
            model=self.model_combo.currentText().strip(),
        )

    def _on_accept(self):
        if not self.key_edit.text().strip():
            QMessageBox.warning(self, "Warning", "API key cannot be empty")
            return
        if not self.model_combo.currentText().strip():
            QMessageBox.warning(self, "Warning", "Model name cannot be empty")
            return
        self.accept()

    def _fetch_models(self):
        """Load the model list from the endpoint"""
        self.fetch_btn.setEnabled(False)
        self.status_label.setText("Fetching models...")

        self.models_worker = ModelsWorker(self.config())
        self.models_worker.finished.connect(self._on_models_finished)
        self.models_worker.error.connect(self._on_models_error)
        self.models_worker.start()

    @Slot(list)
    def _on_models_finished(self, models: List[ModelInfo]):
        current = self.model_combo.currentText()
        self.model_combo.clear()
        self.model_combo.addItems([m.id for m in models])
        self.model_combo.setCurrentText(current)
        self.fetch_btn.setEnabled(True)
        self.status_label.setText(f"{len(models)} models available")

    @Slot(str)
    def _on_models_error(self, error: str):
        self.fetch_btn.setEnabled(True)
        self.status_label.setText("")
        QMessageBox.critical(self, "Error", error)
