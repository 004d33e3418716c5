from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_SERVER_URL

DEFAULT_INFO_TEXT = "I am a small chat bot. Type !help to see what I can do."


class AppConfig(BaseModel):
    """Represents the bot's configuration.

    Attributes:
        username: Twitch login the bot connects as.
        oauth_token: Chat OAuth token, stored without the ``oauth:`` prefix.
        channel: Channel to join, lower-cased and without leading '#'.
        server_url: Websocket endpoint of the chat server.
        greeting: Message sent once after joining, empty to stay silent.
        greet_joins: Whether users joining the channel get a welcome message.
        info_text: Reply to the ``!info`` command.
    """

    username: str = Field(min_length=3, max_length=25)
    oauth_token: str = Field(min_length=1, repr=False)
    channel: str = Field(min_length=1)
    server_url: str = DEFAULT_SERVER_URL
    greeting: str = "Hello, world!"
    greet_joins: bool = False
    info_text: str = DEFAULT_INFO_TEXT

    @field_validator("username", mode="before")
    @classmethod
    def validate_username(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("channel", mode="before")
    @classmethod
    def validate_channel(cls, v: Any) -> Any:
        """Strip whitespace and the leading '#', lower-case the name."""
        if isinstance(v, str):
            return v.strip().lstrip("#").lower()
        return v

    @field_validator("oauth_token", mode="before")
    @classmethod
    def validate_oauth_token(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            if v.lower().startswith("oauth:"):
                v = v[len("oauth:") :]
        return v

    @field_validator("server_url")
    @classmethod
    def validate_server_url(cls, v: str) -> str:
        if not v.startswith(("ws://", "wss://")):
            raise ValueError("server_url must be a ws:// or wss:// URL")
        return v

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppConfig:
        return cls.model_validate(dict(data))
