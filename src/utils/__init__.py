"""
Utility functions for Archive Browser.
"""

from .logging import log_error, update_log_file_path, get_log_file
from .formatting import join_path, trim_extension, truncate_text
from .viewport import reposition, ascend_offset

__all__ = [
    "log_error",
    "update_log_file_path",
    "get_log_file",
    "join_path",
    "trim_extension",
    "truncate_text",
    "reposition",
    "ascend_offset",
]
