"""Structured event logger used across the bot."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

_CHAT_EVENTS = ("bot_text_message", "irc_send")


def _supports_color(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except Exception:  # pragma: no cover
        return False


def _debug_from_env() -> bool:
    return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")


class SimpleFormatter(logging.Formatter):
    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[36m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[35m",
    }
    RESET = "\x1b[0m"

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self.enable_color = _supports_color(stream or sys.stdout)

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        msg = record.getMessage()
        # 'CRITICAL' is the longest level name (8 chars).
        level = record.levelname.ljust(8)
        if self.enable_color:
            color = self.LEVEL_COLORS.get(record.levelno, "")
            return f"{color}{level}{self.RESET} {msg}"
        return f"{level} {msg}"


class BotLogger:
    """Thin wrapper around :mod:`logging` emitting ``domain_action`` events.

    Human readable text comes from the event template catalog unless the
    caller passes ``human`` explicitly. ``user`` and ``channel`` keyword
    arguments are rendered as a fixed width prefix; the remaining keyword
    arguments are only shown in debug mode.
    """

    def __init__(self, name: str = "chatbot", log_file: str | None = None) -> None:
        self.logger = logging.getLogger(name)
        self.log_file = log_file
        self.logger.handlers.clear()
        self.logger.setLevel(logging.DEBUG if _debug_from_env() else logging.INFO)
        self.logger.propagate = False

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(SimpleFormatter(sys.stdout))
        self.logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
            )
            self.logger.addHandler(file_handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        event_name = f"{domain}_{action}".lower()
        human_text = human
        derived = False
        if human_text is None:
            # Local import to avoid cyclic import issues during module init.
            from .event_catalog import EVENT_TEMPLATES as _event_templates

            template = _event_templates.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                derived = True
        kwargs.setdefault("_human_text", human_text)
        if derived:
            kwargs.setdefault("derived", True)
        self._log(level, event_name, exc_info=exc_info, **kwargs)

    def _log(
        self, level: int, event_name: str, exc_info: bool = False, **kwargs: object
    ) -> None:
        kw: dict[str, object] = dict(kwargs)
        user, channel, human_text = self._extract_reserved(kw)
        prefix = self._build_prefix(user, channel)
        if _debug_from_env():
            msg = self._build_debug_message(event_name, prefix, human_text, kw)
        else:
            msg = self._build_concise_message(event_name, prefix, human_text)
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _extract_reserved(
        kwargs: dict[str, object],
    ) -> tuple[str | None, str | None, str | None]:
        user_o = kwargs.pop("user", None)
        channel_o = kwargs.pop("channel", None)
        human_text_o = kwargs.pop("_human_text", None)
        user = user_o if isinstance(user_o, str) else None
        channel = channel_o if isinstance(channel_o, str) else None
        human_text = human_text_o if isinstance(human_text_o, str) else None
        return user, channel, human_text

    @staticmethod
    def _build_prefix(user: str | None, channel: str | None) -> str:
        core = user or "system"
        if channel:
            core = f"{core}#{channel}"
        return f"[{core.ljust(24)[:24]}]"

    @staticmethod
    def _decorate_chat(event_name: str, human_text: str | None) -> str | None:
        if event_name in _CHAT_EVENTS and human_text and not human_text.startswith("💬"):
            return f"💬 {human_text}"
        return human_text

    @classmethod
    def _build_debug_message(
        cls,
        event_name: str,
        prefix: str,
        human_text: str | None,
        kwargs: dict[str, object],
    ) -> str:
        human_text = cls._decorate_chat(event_name, human_text)
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        width = 32
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {prefix}"
        if human_text:
            base = f"{base} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base

    @classmethod
    def _build_concise_message(
        cls, event_name: str, prefix: str, human_text: str | None
    ) -> str:
        human_text = cls._decorate_chat(event_name, human_text)
        return f"{prefix} {human_text or event_name}"


logger = BotLogger()
