"""Tests for terminal keyboard decoding and terminal mode handling."""

import io
import os

import pytest

from menuclip.exceptions import TerminalUnavailableError
from menuclip.menu.model import InputEvent
from menuclip.ui import keyboard


class TestSplitKeys:
    def test_single_characters(self):
        assert keyboard.split_keys("jk") == ["j", "k"]

    def test_arrow_sequences_stay_together(self):
        assert keyboard.split_keys("\x1b[A\x1b[Bj") == ["\x1b[A", "\x1b[B", "j"]

    def test_application_mode_arrows(self):
        assert keyboard.split_keys("\x1bOA") == ["\x1bOA"]

    def test_lone_escape(self):
        assert keyboard.split_keys("\x1b") == ["\x1b"]

    def test_escape_followed_by_enter(self):
        assert keyboard.split_keys("\x1b\r") == ["\x1b", "\r"]


class TestDecodeKeys:
    @pytest.mark.parametrize(
        "chars,expected",
        [
            ("\x1b[A", InputEvent.MOVE_UP),
            ("k", InputEvent.MOVE_UP),
            ("\x1b[B", InputEvent.MOVE_DOWN),
            ("j", InputEvent.MOVE_DOWN),
            ("\r", InputEvent.CONFIRM),
            ("\n", InputEvent.CONFIRM),
            ("\x1b", InputEvent.CANCEL),
            ("\x03", InputEvent.QUIT),
        ],
    )
    def test_key_mapping(self, chars, expected):
        assert keyboard.decode_keys(chars) == [expected]

    def test_unknown_keys_are_ignored(self):
        assert keyboard.decode_keys("xq\x1b[C") == []

    def test_burst_of_keys(self):
        assert keyboard.decode_keys("jj\r\x1b") == [
            InputEvent.MOVE_DOWN,
            InputEvent.MOVE_DOWN,
            InputEvent.CONFIRM,
            InputEvent.CANCEL,
        ]


class TestTerminalKeyboard:
    def test_stream_without_fileno_is_unavailable(self):
        with pytest.raises(TerminalUnavailableError):
            with keyboard.TerminalKeyboard(io.StringIO()):
                pass

    def test_pipe_is_not_a_terminal(self):
        read_fd, write_fd = os.pipe()
        try:
            with os.fdopen(read_fd) as stream:
                with pytest.raises(TerminalUnavailableError, match="Terminal unavailable"):
                    with keyboard.TerminalKeyboard(stream):
                        pass
        finally:
            os.close(write_fd)

    def test_enters_cbreak_and_restores_once(self, mocker):
        stream = mocker.Mock()
        stream.fileno.return_value = 7
        mocker.patch.object(keyboard.termios, "tcgetattr", return_value=["saved"])
        setcbreak = mocker.patch.object(keyboard.tty, "setcbreak")
        tcsetattr = mocker.patch.object(keyboard.termios, "tcsetattr")

        with keyboard.TerminalKeyboard(stream) as kb:
            setcbreak.assert_called_once_with(7)
            kb.restore()

        tcsetattr.assert_called_once_with(7, keyboard.termios.TCSADRAIN, ["saved"])

    def test_events_until_end_of_input(self, mocker):
        kb = keyboard.TerminalKeyboard(mocker.Mock())
        mocker.patch.object(kb, "read_chars", side_effect=["j", "x", "\x1b[A\r", ""])

        assert list(kb.events()) == [
            InputEvent.MOVE_DOWN,
            InputEvent.MOVE_UP,
            InputEvent.CONFIRM,
        ]

    def test_read_chars_decodes_bytes(self, mocker):
        kb = keyboard.TerminalKeyboard(mocker.Mock())
        read = mocker.patch.object(keyboard.os, "read", return_value=b"\x1b[B")

        assert kb.read_chars() == "\x1b[B"
        read.assert_called_once_with(None, keyboard.READ_SIZE)

    def test_arrow_split_across_reads_is_one_move(self, mocker):
        kb = keyboard.TerminalKeyboard(mocker.Mock())
        mocker.patch.object(kb, "read_chars", side_effect=["\x1b", "[A", ""])
        mocker.patch.object(kb, "more_input_pending", return_value=True)

        assert list(kb.events()) == [InputEvent.MOVE_UP]

    def test_lone_escape_without_followup_is_cancel(self, mocker):
        kb = keyboard.TerminalKeyboard(mocker.Mock())
        mocker.patch.object(kb, "read_chars", side_effect=["\x1b", "j", ""])
        mocker.patch.object(kb, "more_input_pending", return_value=False)

        assert list(kb.events()) == [InputEvent.CANCEL, InputEvent.MOVE_DOWN]

    def test_held_escape_flushed_when_input_ends(self, mocker):
        kb = keyboard.TerminalKeyboard(mocker.Mock())
        mocker.patch.object(kb, "read_chars", side_effect=["\x1b", ""])
        mocker.patch.object(kb, "more_input_pending", return_value=True)

        assert list(kb.events()) == [InputEvent.CANCEL]

    def test_more_input_pending_polls_descriptor(self, mocker):
        stream = mocker.Mock()
        stream.fileno.return_value = 7
        kb = keyboard.TerminalKeyboard(stream)
        kb._fd = 7
        poll = mocker.patch.object(keyboard.select, "select", return_value=([7], [], []))

        assert kb.more_input_pending() is True
        poll.assert_called_once_with([7], [], [], keyboard.ESCAPE_TIMEOUT)


class TestPartialEscape:
    @pytest.mark.parametrize("chars", ["\x1b", "j\x1b[", "\x1bO"])
    def test_incomplete_sequences(self, chars):
        assert keyboard.ends_with_partial_escape(chars)

    @pytest.mark.parametrize("chars", ["", "j", "\x1b[A", "\x1b\r"])
    def test_complete_input(self, chars):
        assert not keyboard.ends_with_partial_escape(chars)
