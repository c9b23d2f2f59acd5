"""
cli - Command Line Interface for Batch Renaming Tool
"""

from .cli_entry import main

__all__ = ["main"]
