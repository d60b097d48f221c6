"""Utility functions for typewright."""

from typewright.utils.constants import Constants
from typewright.utils.helpers import expand_file_path, read_text_file, write_file_safely
from typewright.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "expand_file_path",
    "read_text_file",
    "setup_logger",
    "write_file_safely",
]
