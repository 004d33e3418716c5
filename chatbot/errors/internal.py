"""Centralized internal error hierarchy.

Only the collaborators around the parser raise these. The parser itself
never raises: a line it cannot read simply produces no event.

Classes:
  InternalError          – Base for all internal errors.
  ConfigError            – Missing, unreadable or invalid configuration.
  ConnectorError         – Base for chat transport failures.
  ConnectionFailedError  – Websocket could not be opened or authenticated.
  MessageReceiveError    – Receiving a frame from the chat server failed.
  MessageSendError       – Sending a line to the chat server failed.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ConfigError(InternalError):
    """Raised when the bot configuration cannot be loaded or validated."""


class ConnectorError(InternalError):
    """Base class for chat transport failures.

    Kept apart from the parser's "no event" outcome: a connector error means
    the connection itself is unusable, not that a line was uninteresting.
    """


class ConnectionFailedError(ConnectorError):
    """Raised when the websocket connection cannot be established."""


class MessageReceiveError(ConnectorError):
    """Raised when receiving a message from the chat server fails."""


class MessageSendError(ConnectorError):
    """Raised when sending a message to the chat server fails."""


__all__ = [
    "InternalError",
    "ConfigError",
    "ConnectorError",
    "ConnectionFailedError",
    "MessageReceiveError",
    "MessageSendError",
]
