"""Utility modules for prettydoc.

Provides:
- text: display_width for column accounting
- logger: get_logger for logging
"""

from prettydoc.utils.logger import get_logger
from prettydoc.utils.text import contains_line_break, display_width

__all__ = [
    "contains_line_break",
    "display_width",
    "get_logger",
]
