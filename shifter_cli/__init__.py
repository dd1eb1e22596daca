"""
shifter_cli - Command Line Interface for File Shifter
"""

from .cli_entry import main, run_shift, create_parser
from .progress import ProgressBar, VerboseReporter

__all__ = ["main", "run_shift", "create_parser", "ProgressBar", "VerboseReporter"]
