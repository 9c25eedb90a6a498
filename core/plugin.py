"""Launcher plugin facade.

The host calls ``get_matches`` for every edit of the input and ``handler`` when the user
picks an entry. Queries run on one persistent event loop so the HTTP session is reused.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from config.loader import load_config
from core.pipeline import TranslatePipeline
from core.shared_data import SharedData
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from core.trans.interface import TransInterface
    from models.config_models import Config
    from models.translation_models import TranslationResult

__all__: list[str] = ["PluginInfo", "TranslatePlugin"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

PLUGIN_NAME: Final[str] = "Translate"
PLUGIN_ICON: Final[str] = "preferences-desktop-locale"


@dataclass(frozen=True)
class PluginInfo:
    name: str
    icon: str


class TranslatePlugin:
    """Owns the shared resources and the event loop for the lifetime of the host process."""

    def __init__(self, config: Config, *, engine: TransInterface | None = None) -> None:
        self.shared: SharedData = SharedData.create(config, engine)
        self.pipeline = TranslatePipeline(self.shared)
        self._runner = asyncio.Runner()

    @classmethod
    def init(cls, config_dir: str | Path, **args) -> TranslatePlugin:
        """Load ``translate.ini`` from ``config_dir`` (defaults when unusable) and configure logging."""
        config: Config = load_config(config_dir, **args)
        log_file: str = config.GENERAL.LOG_FILE
        if log_file:
            log_file = str((Path(config_dir) / log_file).resolve())
        logger_utils = LoggerUtils(log_file)
        logger_utils.set_level("DEBUG" if config.GENERAL.DEBUG else "INFO")
        return cls(config)

    @staticmethod
    def info() -> PluginInfo:
        return PluginInfo(name=PLUGIN_NAME, icon=PLUGIN_ICON)

    def get_matches(self, query: str) -> list[TranslationResult]:
        """Resolve ``query`` synchronously on the plugin's event loop."""
        return self._runner.run(self.pipeline.resolve(query))

    async def resolve(self, query: str) -> list[TranslationResult]:
        return await self.pipeline.resolve(query)

    @staticmethod
    def handler(selection: TranslationResult) -> bytes:
        """Bytes the host should copy to the clipboard for the selected entry."""
        return selection.title.encode("utf-8")

    def close(self) -> None:
        self._runner.run(self.shared.engine.close())
        self._runner.close()
        logger.info("'%s' plugin closed", PLUGIN_NAME)
