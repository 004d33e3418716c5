"""Error hierarchy exports."""

from .internal import (  # noqa: F401
    ConfigError,
    ConnectionFailedError,
    ConnectorError,
    InternalError,
    MessageReceiveError,
    MessageSendError,
)

__all__ = [
    "InternalError",
    "ConfigError",
    "ConnectorError",
    "ConnectionFailedError",
    "MessageReceiveError",
    "MessageSendError",
]
