"""Chat event models produced by the line parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union


class CommandKind(Enum):
    """Bang-commands the bot understands (matched case-sensitively)."""

    HELP = "help"
    INFO = "info"
    SLAP = "slap"

    @classmethod
    def from_name(cls, name: str) -> CommandKind | None:
        try:
            return cls(name)
        except ValueError:
            return None


class Verb(Enum):
    """Protocol verbs that can produce an event."""

    PRIVMSG = "PRIVMSG"
    JOIN = "JOIN"
    PART = "PART"

    @classmethod
    def from_token(cls, token: str) -> Verb | None:
        try:
            return cls(token)
        except ValueError:
            return None


class ParsingState(Enum):
    START = auto()
    TAGS = auto()
    USER_NAME = auto()
    ADDITIONAL_USER_INFO = auto()
    MESSAGE_TOKEN = auto()
    CHANNEL = auto()
    MESSAGE_BODY = auto()


@dataclass(frozen=True, slots=True)
class TextMessage:
    """Plain chat message."""

    body: str
    author: str


@dataclass(frozen=True, slots=True)
class Command:
    """Recognised bang-command with its whitespace separated arguments."""

    kind: CommandKind
    author: str
    arguments: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class Join:
    author: str


@dataclass(frozen=True, slots=True)
class Part:
    author: str


Event = Union[TextMessage, Command, Join, Part]

__all__ = [
    "CommandKind",
    "Verb",
    "ParsingState",
    "TextMessage",
    "Command",
    "Join",
    "Part",
    "Event",
]
