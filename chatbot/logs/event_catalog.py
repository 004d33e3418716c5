"""Human readable text for structured log events.

``event_templates.json`` maps each log domain to its actions, for example
``{"irc": {"ping": "PING from {server}"}}``. ``BotLogger.log_event`` looks
the ``(domain, action)`` pair up here and fills the placeholders from its
keyword arguments.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

TEMPLATES_FILE = Path(__file__).with_name("event_templates.json")

EVENT_TEMPLATES: dict[tuple[str, str], str] = {}


def _flatten(catalog: Mapping[str, Any]) -> dict[tuple[str, str], str]:
    flat: dict[tuple[str, str], str] = {}
    for domain, actions in catalog.items():
        if not isinstance(domain, str) or not isinstance(actions, Mapping):
            continue
        flat.update(
            ((domain, action), text)
            for action, text in actions.items()
            if isinstance(action, str) and isinstance(text, str)
        )
    return flat


def _load_event_templates(path: Path | None = None) -> dict[tuple[str, str], str]:
    """Read the catalog at ``path`` (the bundled file by default).

    Logging must keep working when the catalog is absent or broken, so
    failures are reported as a single ``("app", "load_error")`` entry.
    """
    source = path or TEMPLATES_FILE
    try:
        catalog = json.loads(source.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {("app", "load_error"): "Event templates file missing"}
    except (OSError, ValueError) as e:
        return {("app", "load_error"): f"Failed to load event templates: {e}"[:200]}
    if not isinstance(catalog, Mapping):
        return {}
    return _flatten(catalog)


def reload_event_templates(path: Path | None = None) -> None:
    global EVENT_TEMPLATES  # noqa: PLW0603
    EVENT_TEMPLATES = _load_event_templates(path)


reload_event_templates()

__all__ = ["EVENT_TEMPLATES", "TEMPLATES_FILE", "reload_event_templates"]
