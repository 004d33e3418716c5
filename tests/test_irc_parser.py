from __future__ import annotations

import logging

import pytest

from chatbot.irc.models import (
    Command,
    CommandKind,
    Join,
    ParsingState,
    Part,
    TextMessage,
)
from chatbot.irc.parser import ScanState, parse_event, step
from chatbot.logs.logger import logger as bot_logger

PREFIX = ":carkhy!carkhy@carkhy.tmi.twitch.tv"
TAGS = (
    "@badge-info=;badges=;client-nonce=1e51cee7513a4516545bbc36a22f27eb;color=;"
    "display-name=carkhy;emotes=;first-msg=0;flags=;"
    "id=60904094-3684-4871-9e8c-1400648a804d;mod=0;room-id=120630112;"
    "subscriber=0;tmi-sent-ts=1637614002702;turbo=0;user-id=70346833;user-type="
)


class TestTextMessages:
    """PRIVMSG lines whose body is plain chat text."""

    def test_plain_message(self):
        raw = f"{PREFIX} PRIVMSG #captaincallback :a function that takes a string and returns the message"
        assert parse_event(raw) == TextMessage(
            body="a function that takes a string and returns the message",
            author="carkhy",
        )

    def test_trailing_newline_is_trimmed(self):
        raw = f"{PREFIX} PRIVMSG #captaincallback :backseating backseating\r\n"
        assert parse_event(raw) == TextMessage(
            body="backseating backseating", author="carkhy"
        )

    def test_message_with_tags(self):
        raw = f"{TAGS} {PREFIX} PRIVMSG #captaincallback :copy/paste that in your code"
        assert parse_event(raw) == TextMessage(
            body="copy/paste that in your code", author="carkhy"
        )

    def test_body_may_contain_colons_and_bangs(self):
        raw = f"{PREFIX} PRIVMSG #chan :time: 12:30 wow!"
        event = parse_event(raw)
        assert isinstance(event, TextMessage)
        assert event.body == "time: 12:30 wow!"

    def test_multibyte_author_and_body_preserved(self):
        raw = ":ñandú!ñandú@ñandú.tmi.twitch.tv PRIVMSG #カナ :こんにちは 👋 wörld"
        assert parse_event(raw) == TextMessage(body="こんにちは 👋 wörld", author="ñandú")

    def test_empty_body_is_not_an_event(self):
        assert parse_event(f"{PREFIX} PRIVMSG #chan :\r\n") is None
        assert parse_event(f"{PREFIX} PRIVMSG #chan :") is None
        assert parse_event(f"{PREFIX} PRIVMSG #chan :   ") is None

    def test_trigger_after_leading_space_is_text(self):
        raw = f"{PREFIX} PRIVMSG #chan : !help"
        assert parse_event(raw) == TextMessage(body="!help", author="carkhy")

    def test_trigger_after_leading_space_with_arguments_is_text(self):
        raw = f"{PREFIX} PRIVMSG #chan :  !slap someone\r\n"
        assert parse_event(raw) == TextMessage(body="!slap someone", author="carkhy")


class TestCommands:
    """PRIVMSG lines whose body starts with the trigger character."""

    def test_command_with_arguments(self):
        raw = f"{PREFIX} PRIVMSG #captaincallback :!help option1 option2"
        assert parse_event(raw) == Command(
            kind=CommandKind.HELP,
            author="carkhy",
            arguments=("option1", "option2"),
        )

    @pytest.mark.parametrize(
        "name,kind",
        [("help", CommandKind.HELP), ("info", CommandKind.INFO), ("slap", CommandKind.SLAP)],
    )
    def test_command_without_arguments(self, name, kind):
        raw = f"{PREFIX} PRIVMSG #captaincallback :!{name}"
        event = parse_event(raw)
        assert event == Command(kind=kind, author="carkhy", arguments=())

    def test_command_with_trailing_newline_has_no_arguments(self):
        raw = f"{PREFIX} PRIVMSG #captaincallback :!help\r\n"
        event = parse_event(raw)
        assert isinstance(event, Command)
        assert event.arguments == ()

    def test_command_with_tags(self):
        raw = f"{TAGS} {PREFIX} PRIVMSG #captaincallback :!slap @someone"
        assert parse_event(raw) == Command(
            kind=CommandKind.SLAP, author="carkhy", arguments=("@someone",)
        )

    def test_unknown_command_is_not_an_event(self):
        assert parse_event(f"{PREFIX} PRIVMSG #chan :!dance now") is None

    def test_command_names_are_case_sensitive(self):
        assert parse_event(f"{PREFIX} PRIVMSG #chan :!HELP") is None


class TestMembership:
    def test_join(self):
        raw = f"{PREFIX} JOIN #captaincallback"
        assert parse_event(raw) == Join(author="carkhy")

    def test_part(self):
        raw = f"{PREFIX} PART #captaincallback\r\n"
        assert parse_event(raw) == Part(author="carkhy")

    def test_trailing_content_is_ignored(self):
        raw = f"{PREFIX} JOIN #chan :whatever comes after"
        assert parse_event(raw) == Join(author="carkhy")

    def test_verb_without_following_space_is_not_an_event(self):
        assert parse_event(f"{PREFIX} JOIN") is None


class TestUnparseableLines:
    @pytest.mark.parametrize(
        "raw",
        [
            "PING :tmi.twitch.tv",
            "PING :tmi.twitch.tv\r\n",
            "",
            "hello world",
            ":tmi.twitch.tv 001 bot :Welcome, GLHF!",
            ":carkhy carkhy@host PRIVMSG #chan :hi",
            ":!carkhy@host PRIVMSG #chan :hi",
            f"{PREFIX} NOTICE #chan :Login authentication failed",
            f"{PREFIX} PRIVMSG #chan",
            f"{PREFIX}",
            "@badge-info=;turbo=0 PRIVMSG #chan :missing prefix",
            "@badge-info=;turbo=0",
        ],
    )
    def test_no_event(self, raw):
        assert parse_event(raw) is None


def test_parsing_twice_gives_equal_events():
    raw = f"{TAGS} {PREFIX} PRIVMSG #captaincallback :!info a b"
    assert parse_event(raw) == parse_event(raw)


@pytest.mark.parametrize(
    "raw",
    [
        "PING :tmi.twitch.tv",
        f"{PREFIX} PRIVMSG #chan :!dance",
        f"{TAGS} {PREFIX} PRIVMSG #chan :hello",
    ],
)
def test_parsing_writes_no_log_records(raw, caplog, monkeypatch):
    monkeypatch.setenv("DEBUG", "1")
    bot_logger.logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG)
    previous_level = bot_logger.logger.level
    bot_logger.set_level(logging.DEBUG)
    try:
        parse_event(raw)
    finally:
        bot_logger.set_level(previous_level)
        bot_logger.logger.removeHandler(caplog.handler)
    assert caplog.records == []


class TestStep:
    """The transition function on its own."""

    def test_start_to_tags(self):
        scan, event = step(ScanState(), "@a=b", 0, "@")
        assert scan == ScanState(state=ParsingState.TAGS, marker=1)
        assert event is None

    def test_start_rejects_other_characters(self):
        assert step(ScanState(), "PING", 0, "P") == (None, None)

    def test_tags_collected_on_space(self):
        line = "@subscriber=0;turbo=0 :nick!u@h JOIN #c"
        scan = ScanState(state=ParsingState.TAGS, marker=1)
        index = line.index(" ")
        next_scan, _ = step(scan, line, index, " ")
        assert next_scan is not None
        assert next_scan.state is ParsingState.USER_NAME
        assert next_scan.tags == {"subscriber": "0", "turbo": "0"}
        assert line[next_scan.marker] == "n"

    def test_user_name_captured_at_bang(self):
        line = ":nick!u@h JOIN #c"
        scan = ScanState(state=ParsingState.USER_NAME, marker=1)
        next_scan, _ = step(scan, line, 5, "!")
        assert next_scan is not None
        assert next_scan.author == "nick"
        assert next_scan.state is ParsingState.ADDITIONAL_USER_INFO

    def test_message_token_dispatches_join(self):
        line = ":nick!u@h JOIN #c"
        scan = ScanState(state=ParsingState.MESSAGE_TOKEN, marker=10, author="nick")
        assert step(scan, line, 14, " ") == (None, Join(author="nick"))

    def test_step_does_not_mutate_input_state(self):
        scan = ScanState()
        step(scan, ":a!b c", 0, ":")
        assert scan == ScanState()
