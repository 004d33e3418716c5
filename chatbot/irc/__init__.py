"""IRC subsystem package.

Contains the line parser (tags, commands, state machine), the event models
and the websocket connector for Twitch chat.
"""

from .commands import parse_command  # noqa: F401
from .connector import TwitchChatConnector  # noqa: F401
from .models import (  # noqa: F401
    Command,
    CommandKind,
    Event,
    Join,
    ParsingState,
    Part,
    TextMessage,
    Verb,
)
from .parser import parse_event, step  # noqa: F401
from .tags import parse_tags  # noqa: F401

__all__ = [
    "Command",
    "CommandKind",
    "Event",
    "Join",
    "ParsingState",
    "Part",
    "TextMessage",
    "TwitchChatConnector",
    "Verb",
    "parse_command",
    "parse_event",
    "parse_tags",
    "step",
]
