"""
gui - PySide6 Interface for Batch Renaming Tool
"""

from .gui_entry import main

__all__ = ["main"]
