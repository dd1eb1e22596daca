"""
shifter_gui - PySide6 front-end for File Shifter
"""

from .gui_entry import main

__all__ = ["main"]
