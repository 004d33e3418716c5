"""Bang-command recognition."""

from __future__ import annotations

from ..constants import COMMAND_TRIGGER
from .models import Command, CommandKind


def split_command(text: str) -> tuple[str, tuple[str, ...]] | None:
    """Return ``(name, arguments)`` for ``!name arg1 arg2``.

    Arguments are split on single spaces, so an empty remainder gives an
    empty tuple. Returns None when ``text`` does not start with the trigger.
    """
    if not text.startswith(COMMAND_TRIGGER):
        return None
    name, _, remainder = text[len(COMMAND_TRIGGER) :].partition(" ")
    arguments = tuple(remainder.split(" ")) if remainder else ()
    return name, arguments


def parse_command(text: str, author: str) -> Command | None:
    """Build a :class:`Command` from a message body.

    Unknown command names yield None, exactly like any other line that
    cannot be read as an event.
    """
    split = split_command(text)
    if split is None:
        return None
    name, arguments = split
    kind = CommandKind.from_name(name)
    if kind is None:
        return None
    return Command(kind=kind, author=author, arguments=arguments)
