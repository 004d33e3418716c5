"""IRCv3 tag segment parsing."""

from __future__ import annotations


def parse_tags(raw_tags: str) -> dict[str, str]:
    """Split ``key=value;key=value`` into a dict.

    A segment without ``=`` maps to an empty value and a later duplicate key
    overwrites an earlier one. Malformed input never raises.
    """
    tags: dict[str, str] = {}
    for tag in raw_tags.split(";"):
        key, _, value = tag.partition("=")
        tags[key] = value
    return tags
