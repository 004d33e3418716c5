"""
Configuration constants for the chat bot

Protocol markers are fixed. Network timings can be overridden by setting an
environment variable with the same name.
"""

import os


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    If the variable is not set or cannot be parsed, prints a warning and
    returns the default value.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Wire protocol markers
TAG_MARKER = "@"  # Leading character of an IRCv3 tag segment
PREFIX_MARKER = ":"  # Leading character of the :nick!user@host prefix
USER_INFO_MARKER = "!"  # Separates the nick from the user/host part
BODY_MARKER = ":"  # Introduces the trailing message body
COMMAND_TRIGGER = "!"  # First character of a bot command body

# Connection defaults
DEFAULT_SERVER_URL = "wss://irc-ws.chat.twitch.tv:443"
DEFAULT_CONFIG_FILE = "chatbot.conf"
CONNECT_TIMEOUT_SECONDS = _get_env_float(
    "CONNECT_TIMEOUT_SECONDS", 10.0
)  # Websocket opening handshake timeout
CLOSE_TIMEOUT_SECONDS = _get_env_float(
    "CLOSE_TIMEOUT_SECONDS", 5.0
)  # Websocket closing handshake timeout
