"""Line parser turning raw Twitch IRC lines into chat events.

The parser is a small state machine walked one character at a time::

    START -> [TAGS] -> USER_NAME -> ADDITIONAL_USER_INFO -> MESSAGE_TOKEN
          -> (JOIN | PART) done
          -> PRIVMSG -> CHANNEL -> MESSAGE_BODY done

``step`` is the pure transition function; ``parse_event`` drives it over a
line. Anything that does not fit the shape above yields None. That is the
normal outcome for pings, numerics and other server chatter, so it is never
raised as an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from ..constants import (
    BODY_MARKER,
    COMMAND_TRIGGER,
    PREFIX_MARKER,
    TAG_MARKER,
    USER_INFO_MARKER,
)
from .commands import parse_command
from .models import Event, Join, ParsingState, Part, TextMessage, Verb
from .tags import parse_tags


@dataclass(frozen=True, slots=True)
class ScanState:
    """Position of the state machine within one line.

    ``marker`` is the index where the span currently being accumulated
    starts (tags, user name, verb or body depending on ``state``).
    """

    state: ParsingState = ParsingState.START
    marker: int = 0
    author: str = ""
    tags: dict[str, str] = field(default_factory=dict)


# (next scan state, event). A None scan state ends the parse; the event is
# then the result (None meaning the line is not an event).
StepResult = tuple[ScanState | None, Event | None]

_FAIL: StepResult = (None, None)


def _continue(scan: ScanState) -> StepResult:
    return scan, None


def _done(event: Event | None) -> StepResult:
    return None, event


def _step_start(scan: ScanState, index: int, char: str) -> StepResult:
    if char == TAG_MARKER:
        return _continue(replace(scan, state=ParsingState.TAGS, marker=index + 1))
    if char == PREFIX_MARKER:
        return _continue(replace(scan, state=ParsingState.USER_NAME, marker=index + 1))
    return _FAIL


def _step_tags(scan: ScanState, line: str, index: int, char: str) -> StepResult:
    if char != " ":
        return _continue(scan)
    # Tags are always followed by the ':' prefix marker.
    if line[index + 1 : index + 2] != PREFIX_MARKER:
        return _FAIL
    return _continue(
        replace(
            scan,
            state=ParsingState.USER_NAME,
            marker=index + 2,
            tags=parse_tags(line[scan.marker : index]),
        )
    )


def _step_user_name(scan: ScanState, line: str, index: int, char: str) -> StepResult:
    if char == " ":
        return _FAIL
    if char != USER_INFO_MARKER:
        return _continue(scan)
    author = line[scan.marker : index]
    if not author:
        return _FAIL
    return _continue(
        replace(scan, state=ParsingState.ADDITIONAL_USER_INFO, author=author)
    )


def _step_message_token(
    scan: ScanState, line: str, index: int, char: str
) -> StepResult:
    if char != " ":
        return _continue(scan)
    match Verb.from_token(line[scan.marker : index]):
        case Verb.PRIVMSG:
            return _continue(replace(scan, state=ParsingState.CHANNEL))
        case Verb.JOIN:
            return _done(Join(author=scan.author))
        case Verb.PART:
            return _done(Part(author=scan.author))
        case None:
            return _FAIL


def _step_message_body(scan: ScanState, line: str) -> StepResult:
    # The trigger only counts right after the body marker, before trimming.
    is_command = line.startswith(COMMAND_TRIGGER, scan.marker)
    body = line[scan.marker :].strip()
    if not body:
        return _FAIL
    if is_command:
        return _done(parse_command(body, scan.author))
    return _done(TextMessage(body=body, author=scan.author))


def step(scan: ScanState, line: str, index: int, char: str) -> StepResult:
    """Consume ``char`` found at ``line[index]`` and return the transition."""
    match scan.state:
        case ParsingState.START:
            return _step_start(scan, index, char)
        case ParsingState.TAGS:
            return _step_tags(scan, line, index, char)
        case ParsingState.USER_NAME:
            return _step_user_name(scan, line, index, char)
        case ParsingState.ADDITIONAL_USER_INFO:
            if char == " ":
                return _continue(
                    replace(scan, state=ParsingState.MESSAGE_TOKEN, marker=index + 1)
                )
            return _continue(scan)
        case ParsingState.MESSAGE_TOKEN:
            return _step_message_token(scan, line, index, char)
        case ParsingState.CHANNEL:
            if char == BODY_MARKER:
                return _continue(
                    replace(scan, state=ParsingState.MESSAGE_BODY, marker=index + 1)
                )
            return _continue(scan)
        case ParsingState.MESSAGE_BODY:
            return _step_message_body(scan, line)


def parse_event(line: str) -> Event | None:
    """Parse one raw protocol line into an event, or None if it is not one."""
    scan = ScanState()
    event: Event | None = None
    for index, char in enumerate(line):
        next_scan, event = step(scan, line, index, char)
        if next_scan is None:
            break
        scan = next_scan

    return event


__all__ = ["ScanState", "StepResult", "step", "parse_event"]
