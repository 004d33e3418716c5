"""Bot logic package (event to action mapping)."""

from .chat_bot import BotAction, ChatBot, LogTextMessage, SendMessage  # noqa: F401

__all__ = ["BotAction", "ChatBot", "LogTextMessage", "SendMessage"]
