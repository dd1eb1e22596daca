"""
gui_workers.py - GUI Worker Threads

Provides background planning and execution to avoid blocking the UI
"""

from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from shifter_core import (
    expand_pattern, plan_shift, execute_shift,
    ShiftError, ShiftOptions, RenamePlan,
)


class PlanWorker(QThread):
    """Pattern matching and plan generation worker thread"""

    # Signals
    progress = Signal(str)              # Progress message
    finished = Signal(object)           # RenamePlan
    error = Signal(str)                 # Error message

    def __init__(
        self,
        pattern: str,
        shift: int,
        options: Optional[ShiftOptions] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.pattern = pattern
        self.shift = shift
        self.options = options or ShiftOptions()

    def run(self):
        try:
            self.progress.emit(f"Matching {self.pattern}...")
            entries = expand_pattern(self.pattern, files_only=self.options.files_only)

            self.progress.emit("Generating shift plan...")
            plan = plan_shift(entries, self.shift, self.options)

            self.finished.emit(plan)
        except (ShiftError, OSError) as e:
            self.error.emit(str(e))


class ShiftWorker(QThread):
    """Shift execution worker thread"""

    # Signals
    progress = Signal(int, int, str)    # completed, total, message
    entry_error = Signal(str)           # Per-file error, run continues
    finished = Signal(object)           # ShiftResult
    error = Signal(str)                 # Error message

    def __init__(
        self,
        plan: RenamePlan,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.plan = plan

    def run(self):
        try:
            def progress_callback(completed: int, total: int, msg: str):
                self.progress.emit(completed, total, msg)

            def error_callback(error: ShiftError):
                self.entry_error.emit(str(error))

            result = execute_shift(
                self.plan,
                progress_callback=progress_callback,
                error_callback=error_callback,
            )

            self.finished.emit(result)
        except OSError as e:
            # Log directory problems surface here
            self.error.emit(str(e))
