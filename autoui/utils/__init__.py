"""
Utility functions and helpers for AutoUI.
Common functionality shared across modules.
"""

from .yaml_utils import YamlUtils
from .logging_utils import setup_logging, get_logger, LoggerMixin
from .file_utils import FileUtils

__all__ = [
    "YamlUtils",
    "setup_logging",
    "get_logger",
    "LoggerMixin",
    "FileUtils",
]
