"""Process entry point: receive, dispatch and reply loop."""

from __future__ import annotations

import asyncio
import logging
import sys

from .bot.chat_bot import ChatBot, LogTextMessage, SendMessage
from .config.loader import load_config
from .config.model import AppConfig
from .errors.internal import ConfigError, ConnectorError
from .irc.connector import TwitchChatConnector
from .logging_config import LoggerConfigurator
from .logs.logger import logger


async def dispatch(bot: ChatBot, connector: TwitchChatConnector) -> int:
    """Handle one batch of received events; return how many were handled."""
    events = await connector.recv_events()
    for event in events:
        match bot.handle_event(event):
            case SendMessage(text=text):
                await connector.send_message(text)
            case LogTextMessage(text=text):
                logger.log_event(
                    "bot", "text_message", channel=connector.channel, text=text
                )
            case None:
                pass
    return len(events)


async def run(config: AppConfig, connector: TwitchChatConnector | None = None) -> None:
    """Connect and serve chat until the transport fails or the task is cancelled."""
    connector = connector or TwitchChatConnector(config)
    bot = ChatBot.from_config(config)
    logger.log_event("app", "start", user=config.username, target=config.channel)
    try:
        await connector.initialize()
        if config.greeting:
            await connector.send_message(config.greeting)
        while True:
            await dispatch(bot, connector)
    finally:
        await connector.close()


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    LoggerConfigurator().configure()
    try:
        config = load_config(argv[0] if argv else None)
    except ConfigError as e:
        logger.log_event("app", "config_error", level=logging.ERROR, error=str(e))
        return 1

    try:
        asyncio.run(run(config))
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
    except ConnectorError as e:
        logger.log_event(
            "app",
            "transport_error",
            level=logging.ERROR,
            error=str(e),
            error_type=type(e).__name__,
        )
        return 1
    finally:
        logger.log_event("app", "shutdown")
    return 0


if __name__ == "__main__":
    sys.exit(main())
