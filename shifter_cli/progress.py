"""
progress.py - Progress Reporters

Both reporters are plain callables taking (completed, total, message), the
signature execute_shift expects for its progress callback.
"""

import sys
from typing import Optional, TextIO


class ProgressBar:
    """Single-line text progress bar redrawn in place"""

    def __init__(self, width: int = 50, stream: Optional[TextIO] = None):
        self.width = width
        self.stream = stream
        self.drawn = False

    @property
    def _out(self) -> TextIO:
        return self.stream or sys.stdout

    def __call__(self, completed: int, total: int, message: str = "") -> None:
        progress = (completed * 100) // total if total > 0 else 100
        filled = (progress * self.width) // 100
        bar = "#" * filled + "-" * (self.width - filled)
        self._out.write(f"\rProgress: [{bar}] {progress}%")
        self._out.flush()
        self.drawn = True

    def interrupt(self) -> None:
        """End the current bar line so another message can be printed"""
        if self.drawn:
            self._out.write("\n")
            self._out.flush()
            self.drawn = False

    def close(self) -> None:
        self._out.write("\n")
        self._out.flush()
        self.drawn = False


class VerboseReporter:
    """Prints one line per move instead of drawing a bar"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def __call__(self, completed: int, total: int, message: str = "") -> None:
        if message:
            print(message, file=self.stream or sys.stdout)

    def interrupt(self) -> None:
        pass

    def close(self) -> None:
        print("Renaming completed.", file=self.stream or sys.stdout)
