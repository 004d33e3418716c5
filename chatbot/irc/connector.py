"""Websocket transport for Twitch chat.

Owns the connection: authentication, channel join, keep-alive answers and
line framing. Every received line that is not a PING goes through
:func:`chatbot.irc.parser.parse_event`; lines that are not events are
dropped silently.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import websockets
from websockets.exceptions import ConnectionClosed, WebSocketException

from ..constants import CLOSE_TIMEOUT_SECONDS, CONNECT_TIMEOUT_SECONDS
from ..errors.internal import (
    ConnectionFailedError,
    MessageReceiveError,
    MessageSendError,
)
from ..logs.logger import logger
from .models import Event
from .parser import parse_event

if TYPE_CHECKING:  # pragma: no cover
    from ..config.model import AppConfig

# Without these capabilities Twitch neither sends tags nor JOIN/PART lines.
CAPABILITIES = "twitch.tv/tags twitch.tv/membership"


class TwitchChatConnector:
    """Single websocket connection to one Twitch channel.

    Attributes:
        config: Bot configuration (credentials, channel, server URL).
        ws: Active websocket connection, None until :meth:`initialize`.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.ws = None

    @property
    def channel(self) -> str:
        return self.config.channel

    async def initialize(self) -> None:
        """Connect, authenticate and join the configured channel.

        Raises:
            ConnectionFailedError: If the websocket cannot be opened.
            MessageSendError: If the login lines cannot be sent.
        """
        url = self.config.server_url
        logger.log_event("irc", "connecting", user=self.config.username, url=url)
        await self.close()
        try:
            self.ws = await websockets.connect(
                url,
                open_timeout=CONNECT_TIMEOUT_SECONDS,
                close_timeout=CLOSE_TIMEOUT_SECONDS,
                ping_interval=None,
            )
        except (OSError, TimeoutError, WebSocketException) as e:
            logger.log_event(
                "irc",
                "connect_failed",
                level=logging.ERROR,
                user=self.config.username,
                url=url,
                error=str(e),
            )
            raise ConnectionFailedError(
                f"Connecting to {url} failed: {e}", data={"url": url}
            ) from e

        await self._send_line(f"CAP REQ :{CAPABILITIES}")
        await self._send_line(f"PASS oauth:{self.config.oauth_token}")
        await self._send_line(f"NICK {self.config.username}")
        await self._send_line(f"JOIN #{self.channel}")
        logger.log_event(
            "irc", "connected", user=self.config.username, target=self.channel
        )

    async def send_message(self, text: str) -> None:
        """Send ``text`` as a chat message to the configured channel."""
        await self._send_line(f"PRIVMSG #{self.channel} :{text}")
        logger.log_event(
            "irc",
            "send",
            user=self.config.username,
            channel=self.channel,
            text=text,
        )

    async def recv_events(self) -> list[Event]:
        """Receive one websocket frame and return the events it carries.

        A frame may hold several ``\\r\\n`` separated lines. PINGs are
        answered here and never reach the parser.

        Raises:
            MessageReceiveError: If the connection is closed or unusable.
        """
        if self.ws is None:
            raise MessageReceiveError("Not connected")
        try:
            frame = await self.ws.recv()
        except (ConnectionClosed, OSError) as e:
            logger.log_event(
                "irc",
                "recv_failed",
                level=logging.ERROR,
                user=self.config.username,
                error=str(e),
            )
            raise MessageReceiveError(f"Receiving message failed: {e}") from e
        if not isinstance(frame, str):
            raise MessageReceiveError(
                "Received a binary frame", data={"size": len(frame)}
            )

        events: list[Event] = []
        for line in frame.split("\r\n"):
            if not line.strip():
                continue
            if line.startswith("PING"):
                await self._handle_ping(line)
                continue
            logger.log_event(
                "irc", "raw", level=logging.DEBUG, user=self.config.username, raw=line
            )
            event = parse_event(line)
            if event is not None:
                events.append(event)
        return events

    async def close(self) -> None:
        if self.ws is None:
            return
        ws, self.ws = self.ws, None
        try:
            await ws.close()
        except (ConnectionClosed, OSError) as e:
            logger.log_event(
                "irc",
                "closed",
                level=logging.WARNING,
                user=self.config.username,
                error=str(e),
            )
            return
        logger.log_event("irc", "closed", user=self.config.username)

    async def _handle_ping(self, line: str) -> None:
        server = line.split(":", 1)[1] if ":" in line else "tmi.twitch.tv"
        logger.log_event(
            "irc", "ping", level=logging.DEBUG, user=self.config.username, server=server
        )
        await self._send_line(f"PONG :{server}")

    async def _send_line(self, line: str) -> None:
        if self.ws is None:
            raise MessageSendError("Not connected")
        try:
            await self.ws.send(f"{line}\r\n")
        except (ConnectionClosed, OSError) as e:
            logger.log_event(
                "irc",
                "send_failed",
                level=logging.ERROR,
                user=self.config.username,
                error=str(e),
            )
            raise MessageSendError(f"Sending message failed: {e}") from e
