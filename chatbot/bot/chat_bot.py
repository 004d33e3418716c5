"""ChatBot - maps parsed chat events to the actions the bot takes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from ..config.model import DEFAULT_INFO_TEXT
from ..constants import COMMAND_TRIGGER
from ..irc.models import Command, CommandKind, Event, Join, Part, TextMessage
from ..logs.logger import logger

if TYPE_CHECKING:
    from ..config.model import AppConfig


@dataclass(frozen=True, slots=True)
class SendMessage:
    """Reply to post in the channel."""

    text: str


@dataclass(frozen=True, slots=True)
class LogTextMessage:
    """Chat line to show in the bot's log."""

    text: str


BotAction = Union[SendMessage, LogTextMessage]


class ChatBot:
    """Decides how the bot reacts to each chat event.

    Holds no connection; the caller sends :class:`SendMessage` actions back
    through the transport and logs :class:`LogTextMessage` actions.
    """

    def __init__(
        self, info_text: str = DEFAULT_INFO_TEXT, greet_joins: bool = False
    ) -> None:
        self.info_text = info_text
        self.greet_joins = greet_joins

    @classmethod
    def from_config(cls, config: AppConfig) -> ChatBot:
        return cls(info_text=config.info_text, greet_joins=config.greet_joins)

    def handle_event(self, event: Event) -> BotAction | None:
        match event:
            case TextMessage(body=body, author=author):
                return LogTextMessage(f"{author}: {body}")
            case Command():
                logger.log_event(
                    "bot",
                    "command",
                    command=event.kind.value,
                    author=event.author,
                    arguments=list(event.arguments),
                )
                return self.handle_command(event)
            case Join(author=author):
                logger.log_event("bot", "join", author=author)
                if self.greet_joins:
                    return SendMessage(f"Welcome, {author}!")
                return None
            case Part(author=author):
                logger.log_event("bot", "part", author=author)
                return None
        return None

    def handle_command(self, command: Command) -> SendMessage:
        match command.kind:
            case CommandKind.HELP:
                names = ", ".join(f"{COMMAND_TRIGGER}{kind.value}" for kind in CommandKind)
                return SendMessage(f"Available commands: {names}")
            case CommandKind.INFO:
                return SendMessage(self.info_text)
            case CommandKind.SLAP:
                return SendMessage(
                    f"{command.author} slaps {self._slap_target(command)} "
                    "around a bit with a large trout"
                )

    @staticmethod
    def _slap_target(command: Command) -> str:
        for argument in command.arguments:
            target = argument.lstrip("@")
            if target:
                return target
        return command.author
