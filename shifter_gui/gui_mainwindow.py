"""
gui_mainwindow.py - GUI Main Window

Single page: pattern and shift settings, a preview table, execution with a
progress bar and a log pane, and recovery of leftover staging files.
"""

from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QSpinBox,
    QTableWidget, QTableWidgetItem, QTextEdit, QProgressBar,
    QFileDialog, QMessageBox, QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from shifter_core import (
    RenamePlan, ShiftResult, ShiftOptions, INT32_MIN, INT32_MAX,
    validate_plan, restore_staged_files,
)
from .gui_workers import PlanWorker, ShiftWorker


DEFAULT_LOG_DIR = Path.home() / ".file_shifter" / "logs"


class ShiftPanel(QWidget):
    """Pattern / shift settings, preview and execution"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.plan: Optional[RenamePlan] = None
        self.plan_worker: Optional[PlanWorker] = None
        self.shift_worker: Optional[ShiftWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Settings group
        settings_group = QGroupBox("Shift Settings")
        settings_layout = QGridLayout(settings_group)

        settings_layout.addWidget(QLabel("Pattern:"), 0, 0)
        self.pattern_edit = QLineEdit()
        self.pattern_edit.setPlaceholderText("e.g. /path/to/file[0-9]*.txt")
        settings_layout.addWidget(self.pattern_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        settings_layout.addWidget(self.browse_btn, 0, 2)

        settings_layout.addWidget(QLabel("Shift by:"), 1, 0)
        self.shift_spin = QSpinBox()
        self.shift_spin.setRange(INT32_MIN, INT32_MAX)
        self.shift_spin.setValue(1)
        settings_layout.addWidget(self.shift_spin, 1, 1, 1, 2)

        options_layout = QHBoxLayout()
        self.dry_run_check = QCheckBox("Dry Run")
        self.log_check = QCheckBox(f"Save JSON Logs ({DEFAULT_LOG_DIR})")
        options_layout.addWidget(self.dry_run_check)
        options_layout.addWidget(self.log_check)
        options_layout.addStretch()
        settings_layout.addLayout(options_layout, 2, 0, 1, 3)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        settings_layout.addWidget(self.preview_btn, 3, 0, 1, 3)

        layout.addWidget(settings_group)

        # Preview table
        self.table = QTableWidget()
        self.table.setColumnCount(3)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Log pane
        self.log_view = QTextEdit()
        self.log_view.setReadOnly(True)
        self.log_view.setMaximumHeight(140)
        layout.addWidget(self.log_view)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.recover_btn = QPushButton("Recover Staged Files")
        self.recover_btn.clicked.connect(self._do_recover)
        bottom_layout.addWidget(self.recover_btn)

        self.execute_btn = QPushButton("Execute Shift")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _options(self) -> ShiftOptions:
        return ShiftOptions(
            dry_run=self.dry_run_check.isChecked(),
            log_dir=DEFAULT_LOG_DIR if self.log_check.isChecked() else None,
        )

    def _browse_directory(self):
        """Pick a directory and seed the pattern with it"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.pattern_edit.setText(str(Path(directory) / "*[0-9]*"))

    def _set_busy(self, busy: bool):
        self.preview_btn.setEnabled(not busy)
        self.recover_btn.setEnabled(not busy)
        self.execute_btn.setEnabled(not busy and bool(self.plan and self.plan.entries))

    def _do_preview(self):
        """Generate preview"""
        pattern = self.pattern_edit.text().strip()
        if not pattern:
            QMessageBox.warning(self, "Warning", "Please enter a file pattern")
            return

        self.plan = None
        self._set_busy(True)
        self.preview_btn.setText("Generating...")

        self.plan_worker = PlanWorker(pattern, self.shift_spin.value(), options=self._options())
        self.plan_worker.progress.connect(self.status_label.setText)
        self.plan_worker.finished.connect(self._on_plan_finished)
        self.plan_worker.error.connect(self._on_plan_error)
        self.plan_worker.start()

    @Slot(object)
    def _on_plan_finished(self, plan: RenamePlan):
        """Plan generation complete"""
        self.plan = plan
        self.preview_btn.setText("Preview")
        self._set_busy(False)

        self._update_table_preview()

        problems = validate_plan(plan)
        for problem in problems:
            self.log_view.append(f"Warning: {problem}")

        if plan.entries:
            self.status_label.setText(
                f"Will rename {plan.total_count} files (out of range: {len(plan.skipped)})"
            )
        else:
            self.status_label.setText("No files need renaming")

    @Slot(str)
    def _on_plan_error(self, error: str):
        """Plan generation error"""
        self.preview_btn.setText("Preview")
        self._set_busy(False)
        QMessageBox.critical(self, "Error", f"Failed to generate preview: {error}")

    def _update_table_preview(self):
        """Update table to display preview results"""
        if not self.plan:
            return

        rows = len(self.plan.entries) + len(self.plan.skipped)
        self.table.setRowCount(rows)

        for i, entry in enumerate(self.plan.entries):
            self.table.setItem(i, 0, QTableWidgetItem(entry.name))
            self.table.setItem(i, 1, QTableWidgetItem(entry.final_name))
            status_item = QTableWidgetItem("Will Rename")
            status_item.setForeground(QColor(0, 150, 0))
            self.table.setItem(i, 2, status_item)

        offset = len(self.plan.entries)
        for i, skipped in enumerate(self.plan.skipped):
            self.table.setItem(offset + i, 0, QTableWidgetItem(skipped.path.name))
            self.table.setItem(offset + i, 1, QTableWidgetItem(str(skipped.shifted)))
            status_item = QTableWidgetItem("Out of Range")
            status_item.setForeground(QColor(200, 0, 0))
            self.table.setItem(offset + i, 2, status_item)

    def _do_execute(self):
        """Execute shift"""
        if not self.plan or not self.plan.entries:
            return

        if not self.plan.options.dry_run:
            reply = QMessageBox.question(
                self, "Confirm",
                f"Are you sure you want to rename {self.plan.total_count} files?\n\nThis action cannot be undone!",
                QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
            )
            if reply != QMessageBox.StandardButton.Yes:
                return

        self._set_busy(True)
        self.execute_btn.setText("Executing...")
        self.progress_bar.setVisible(True)
        self.progress_bar.setValue(0)

        self.shift_worker = ShiftWorker(self.plan)
        self.shift_worker.progress.connect(self._on_shift_progress)
        self.shift_worker.entry_error.connect(self._on_entry_error)
        self.shift_worker.finished.connect(self._on_shift_finished)
        self.shift_worker.error.connect(self._on_shift_error)
        self.shift_worker.start()

    @Slot(int, int, str)
    def _on_shift_progress(self, completed: int, total: int, msg: str):
        """Execution progress update"""
        self.progress_bar.setRange(0, max(total, 1))
        self.progress_bar.setValue(completed)
        self.status_label.setText(msg)
        self.log_view.append(msg)

    @Slot(str)
    def _on_entry_error(self, error: str):
        self.log_view.append(f"Error: {error}")

    @Slot(object)
    def _on_shift_finished(self, result: ShiftResult):
        """Execution complete"""
        self.plan = None
        self.execute_btn.setText("Execute Shift")
        self._set_busy(False)
        self.progress_bar.setVisible(False)

        msg = f"Shift complete!\n\n{result.summary()}"
        QMessageBox.information(self, "Complete", msg)

        self.table.setRowCount(0)
        self.status_label.setText("Complete")

    @Slot(str)
    def _on_shift_error(self, error: str):
        """Execution error"""
        self.execute_btn.setText("Execute Shift")
        self._set_busy(False)
        self.progress_bar.setVisible(False)
        QMessageBox.critical(self, "Error", f"Execution failed: {error}")

    def _do_recover(self):
        """Restore files left under staging names"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory to Recover")
        if not directory:
            return

        restored, failed = restore_staged_files(Path(directory))
        for path in restored:
            self.log_view.append(f"Restored: {path}")
        for path, reason in failed:
            self.log_view.append(f"Not restored: {path}: {reason}")

        QMessageBox.information(
            self, "Recovery",
            f"Restored {len(restored)} files, {len(failed)} could not be restored."
        )


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("File Shifter")
        self.setMinimumSize(800, 600)

        self.panel = ShiftPanel()
        self.setCentralWidget(self.panel)

        self.statusBar().showMessage("Ready")
