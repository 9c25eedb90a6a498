"""Configuration loading and validation for the translate plugin.

This package provides utilities for loading, parsing, and validating configuration
settings from the translate.ini file.
"""

from config.loader import (
    CFG_FILE,
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigLoader,
    ConfigLoaderError,
    ConfigTypeError,
    ConfigValueError,
    load_config,
)

__all__: list[str] = [
    "CFG_FILE",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
    "load_config",
]
