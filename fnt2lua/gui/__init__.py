"""
GUI module - Graphical user interface components.
"""

from .main_window import ConverterWindow, run_app, setup_logging

__all__ = [
    "ConverterWindow",
    "run_app",
    "setup_logging",
]
