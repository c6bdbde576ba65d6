"""Middleware settings -- reads from environment and ``.env`` file."""

from __future__ import annotations

import logging
import os

from ..messaging.mentions import RemoveBehavior
from ..messaging.middleware import OutputMode
from ..util.env_file import EnvFile
from ..util.singletons import register_singleton

logger = logging.getLogger(__name__)


class Settings:
    """Runtime configuration sourced from environment variables and ``.env``."""

    def __init__(self) -> None:
        self.env = EnvFile(os.getenv("DOTENV_PATH") or ".env")
        self.reload()

    def reload(self) -> None:
        """Re-read the ``.env`` file and environment variables."""
        self.env.invalidate()
        e = self._read

        self.bot_mention_remove_behavior: RemoveBehavior = self._behavior(
            "STRIP_BOT_MENTIONS", e("STRIP_BOT_MENTIONS"), RemoveBehavior.FULL,
        )
        self.user_mention_remove_behavior: RemoveBehavior = self._behavior(
            "STRIP_USER_MENTIONS", e("STRIP_USER_MENTIONS"), RemoveBehavior.TAGS,
        )

        raw_mode = e("STRIP_OUTPUT_MODE").strip().lower()
        try:
            self.output_mode: OutputMode = OutputMode(raw_mode) if raw_mode else OutputMode.ENTITY
        except ValueError:
            logger.warning(
                "Invalid STRIP_OUTPUT_MODE=%r; using %s", raw_mode, OutputMode.ENTITY.value,
            )
            self.output_mode = OutputMode.ENTITY

    # -- helpers -----------------------------------------------------------

    def _read(self, key: str) -> str:
        return self.env.read(key) or os.getenv(key, "")

    @staticmethod
    def _behavior(key: str, raw: str, default: RemoveBehavior) -> RemoveBehavior:
        if not raw:
            return default
        try:
            return RemoveBehavior.parse(raw)
        except ValueError:
            logger.warning("Invalid %s=%r; using %s", key, raw, default.value)
            return default


# Module-level singleton
cfg = Settings()


@register_singleton
def _reset_cfg() -> None:
    global cfg
    cfg = Settings()
