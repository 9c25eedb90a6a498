"""Configuration file loader and validator.

Reads ``translate.ini``, coerces its values into the ``Config`` dataclasses and validates them.
``ConfigLoader`` raises on any problem; ``load_config`` turns those problems into a warning and
the documented defaults.
"""

from __future__ import annotations

import ast
import configparser
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from core.lang.table import LANGUAGES
from models.config_models import Config
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable
    from dataclasses import Field as DataclassField

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

logger: logging.Logger = LoggerUtils.get_logger(__name__)

CFG_FILE: Final[str] = "translate.ini"


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration file."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration file is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration file contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration file contains an invalid type."""


class ConfigLoader:
    """Loads and validates ``translate.ini``.

    Keys missing from the file keep their dataclass defaults.

    Args:
        config_filename (str | Path): INI file to load.
        **args: Command-line overrides (``debug``).

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values/types.
    """

    def __init__(self, *, config_filename: str | Path, **args) -> None:
        config_path = Path(config_filename)
        msg: str
        if not config_path.exists():
            msg = f"Configuration file '{config_path}' not found."
            raise ConfigFileNotFoundError(msg)

        parser: ConfigParser = ConfigParser()
        try:
            parser.read(config_path, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError) as err:
            msg = f"Failed to parse configuration file '{config_path}': {err}"
            raise ConfigFormatError(msg) from None

        self.config = Config()
        self._convert_settings(parser)
        if args.get("debug", False):
            self.config.GENERAL.DEBUG = True
        self._validate_settings()

    def _convert_settings(self, parser: ConfigParser) -> None:
        formatter = _ConfigFormatter(self.config, parser)
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Skipping undefined section: '%s'", section.name)
                continue
            for key in fields(getattr(self.config, section.name)):
                if not parser.has_option(section.name, key.name):
                    continue
                setattr(getattr(self.config, section.name), key.name, formatter.apply_format(section, key))

    def _validate_settings(self) -> None:
        """Validate value ranges and normalise language codes.

        Raises:
            ConfigValueError: If a value is out of range.
            ConfigTypeError: If a value has the wrong type.
        """
        translate = self.config.TRANSLATE

        for key in ("PREFIX", "LANGUAGE_DELIMITER", "DETECTION_FALLBACK", "ENGINE"):
            value: Any = getattr(translate, key)
            if not isinstance(value, str):
                msg: str = f"'TRANSLATE.{key}' must be a string, got {type(value).__name__}"
                raise ConfigTypeError(msg)

        if translate.MAX_ENTRIES < 1:
            msg = f"'TRANSLATE.MAX_ENTRIES' must be 1 or more, got {translate.MAX_ENTRIES}"
            raise ConfigValueError(msg)

        if not translate.LANGUAGE_DELIMITER:
            msg = "'TRANSLATE.LANGUAGE_DELIMITER' must not be empty"
            raise ConfigValueError(msg)

        if isinstance(translate.LANGUAGES, str):
            translate.LANGUAGES = [translate.LANGUAGES]
        if not isinstance(translate.LANGUAGES, list):
            msg = f"Unsupported type used for 'TRANSLATE.LANGUAGES': {type(translate.LANGUAGES)}"
            raise ConfigTypeError(msg)

        codes: list[str] = [str(code).strip().lower() for code in translate.LANGUAGES]
        invalid: list[str] = [code for code in codes if code not in LANGUAGES]
        if invalid:
            msg = f"Unknown language codes in 'TRANSLATE.LANGUAGES': {invalid}"
            raise ConfigValueError(msg)
        translate.LANGUAGES = codes

        if self.config.NETWORK.TIMEOUT <= 0:
            logger.warning("'NETWORK.TIMEOUT' is %s; requests will not time out.", self.config.NETWORK.TIMEOUT)


class _ConfigFormatter:
    """Converts INI string values to the type declared by the Config field default."""

    def __init__(self, config: Config, parser: ConfigParser) -> None:
        self.config: Config = config
        self.parser: ConfigParser = parser

    def apply_format(self, section: DataclassField[Any], key: DataclassField[Any]) -> Any:
        """Convert the INI value for ``section.key``.

        bool/int/float use the dedicated parsers; everything else goes through ``ast.literal_eval``,
        so strings and lists must be written as Python literals (``PREFIX = ":tr "``).

        Raises:
            ConfigValueError: If a value cannot be coerced to the expected type.
            ConfigFormatError: If literal evaluation fails due to invalid syntax.
        """
        formatters: dict[type, Callable[[DataclassField[Any], DataclassField[Any]], bool | int | float]] = {
            bool: self.parse_as_boolean,
            int: self.parse_as_integer,
            float: self.parse_as_float,
        }

        formatter = formatters.get(type(getattr(getattr(self.config, section.name), key.name)))
        if formatter:
            try:
                return formatter(section, key)
            except ValueError as err:
                msg = f"Invalid value for {section.name}.{key.name}: {err}"
                raise ConfigValueError(msg) from err

        value_str: str = self.parser.get(section.name, key.name, raw=True)
        try:
            return ast.literal_eval(value_str)
        except ValueError as err:
            msg = f"Invalid literal for {section.name}.{key.name}: {value_str}"
            raise ConfigValueError(msg) from err
        except SyntaxError as err:
            msg = f"Invalid literal for {section.name}.{key.name}: {value_str}"
            raise ConfigFormatError(msg) from err

    def _unquoted(self, section: DataclassField[Any], key: DataclassField[Any]) -> str:
        value: str = self.parser.get(section.name, key.name, raw=True)
        for char in ("'", '"'):
            value = value.removeprefix(char).removesuffix(char)
        return value

    def parse_as_float(self, section: DataclassField[Any], key: DataclassField[Any]) -> float:
        return float(self._unquoted(section, key))

    def parse_as_integer(self, section: DataclassField[Any], key: DataclassField[Any]) -> int:
        return int(float(self._unquoted(section, key)))

    def parse_as_boolean(self, section: DataclassField[Any], key: DataclassField[Any]) -> bool:
        return self.parser.getboolean(section.name, key.name)


def load_config(config_dir: str | Path, **args) -> Config:
    """Load ``translate.ini`` from ``config_dir``, falling back to defaults on any error."""
    config_path: Path = Path(config_dir) / CFG_FILE
    try:
        return ConfigLoader(config_filename=config_path, **args).config
    except ConfigFileNotFoundError:
        logger.info("'%s' not found, using default settings", config_path)
    except ConfigLoaderError as err:
        logger.warning("Invalid configuration, using default settings: %s", err)

    config = Config()
    if args.get("debug", False):
        config.GENERAL.DEBUG = True
    return config
