"""Twitch chat bot: parses chat lines into events and answers bang-commands."""

__version__ = "0.1.0"
