"""Utility modules for the translate plugin.

This package provides the logging utilities shared by every module.
"""

from utils.logger_utils import LoggerUtils

__all__: list[str] = ["LoggerUtils"]
