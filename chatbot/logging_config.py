r"""
Logging configuration module for the chat bot.

Provides a clean, configurable root logging setup using the colorlog library.
The structured ``BotLogger`` in :mod:`chatbot.logs` writes through its own
handler; this module covers everything else (library loggers included).
"""

import logging
import os
import sys

import colorlog

LOG_FORMAT = (
    "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s "
    "%(message_log_color)s%(message)s"
)
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "magenta",
}


class WebsocketsFrameFilter(logging.Filter):
    """Filter to suppress per-frame debug chatter from the websockets library."""

    def filter(self, record):
        """Return False for websockets frame dumps (lines starting with '<' or '>')."""
        if not record.name.startswith("websockets"):
            return True
        return not record.getMessage().startswith(("< ", "> "))


def build_formatter() -> colorlog.ColoredFormatter:
    return colorlog.ColoredFormatter(
        LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors=LOG_COLORS,
        secondary_log_colors={
            "message": {
                "ERROR": "red",
                "CRITICAL": "magenta",
            }
        },
        reset=True,
    )


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Supports environment variable configuration for log levels.
    """

    def __init__(self, config=None):
        self.config = config or {}

    def log_level(self) -> int:
        """Resolve the level from ``DEBUG`` ('true', '1' or 'yes' means DEBUG)."""
        if "level" in self.config:
            return self.config["level"]
        debug_env = os.environ.get("DEBUG", "").lower()
        return logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

    def configure(self):
        """Configure the root logger with colored output on stderr."""
        log_level = self.log_level()
        formatter = build_formatter()

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        handler.addFilter(WebsocketsFrameFilter())

        logging.basicConfig(
            level=log_level,
            handlers=[handler],
            format="%(message)s",
        )
        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)

        # websockets logs every frame at DEBUG
        logging.getLogger("websockets").setLevel(logging.INFO)
        return handler
