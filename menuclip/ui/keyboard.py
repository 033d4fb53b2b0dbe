"""Terminal keyboard input.

Reads raw key presses from the controlling terminal and decodes them into
logical menu events. The terminal is switched to cbreak mode rather than raw
mode so that Ctrl+C still reaches the process as SIGINT.
"""

from __future__ import annotations

import os
import select
import sys
import termios
import threading
import tty
from typing import Iterator, List, Optional, TextIO

from menuclip.exceptions import TerminalUnavailableError
from menuclip.logging import LoggerFactory
from menuclip.menu.model import InputEvent

ESC = "\x1b"
CTRL_C = "\x03"
READ_SIZE = 32
# How long to wait for the rest of an escape sequence split across reads
ESCAPE_TIMEOUT = 0.05
ESCAPE_PREFIXES = (ESC, f"{ESC}[", f"{ESC}O")

KEY_EVENTS = {
    f"{ESC}[A": InputEvent.MOVE_UP,
    f"{ESC}OA": InputEvent.MOVE_UP,
    "k": InputEvent.MOVE_UP,
    f"{ESC}[B": InputEvent.MOVE_DOWN,
    f"{ESC}OB": InputEvent.MOVE_DOWN,
    "j": InputEvent.MOVE_DOWN,
    "\r": InputEvent.CONFIRM,
    "\n": InputEvent.CONFIRM,
    ESC: InputEvent.CANCEL,
    CTRL_C: InputEvent.QUIT,
}

log = LoggerFactory.for_menu()


def split_keys(chars: str) -> List[str]:
    """Split a chunk of terminal input into individual key sequences.

    Arrow keys arrive as three-character escape sequences; a lone ESC is a
    key of its own.
    """
    keys = []
    index = 0
    while index < len(chars):
        is_sequence = (
            chars[index] == ESC
            and index + 2 < len(chars)
            and chars[index + 1] in ("[", "O")
        )
        if is_sequence:
            keys.append(chars[index : index + 3])
            index += 3
        else:
            keys.append(chars[index])
            index += 1
    return keys


def ends_with_partial_escape(chars: str) -> bool:
    return chars.endswith(ESCAPE_PREFIXES)


def decode_key(key: str) -> Optional[InputEvent]:
    return KEY_EVENTS.get(key)


def decode_keys(chars: str) -> List[InputEvent]:
    events = []
    for key in split_keys(chars):
        event = decode_key(key)
        if event is None:
            log.trace(f"Ignoring key {key!r}")
            continue
        events.append(event)
    return events


class TerminalKeyboard:
    """Context manager owning cbreak mode on a terminal stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream or sys.stdin
        self._fd: Optional[int] = None
        self._old_settings = None
        self._lock = threading.Lock()

    def __enter__(self) -> "TerminalKeyboard":
        try:
            self._fd = self._stream.fileno()
            self._old_settings = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        except (termios.error, OSError, ValueError) as error:
            self._old_settings = None
            raise TerminalUnavailableError(str(error)) from error
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def restore(self) -> None:
        """Put the terminal back the way it was. Safe to call more than once."""
        with self._lock:
            if self._old_settings is None:
                return
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._old_settings)
            self._old_settings = None

    def read_chars(self) -> str:
        data = os.read(self._fd, READ_SIZE)
        return data.decode("utf-8", errors="ignore")

    def more_input_pending(self, timeout: float = ESCAPE_TIMEOUT) -> bool:
        readable, _, _ = select.select([self._fd], [], [], timeout)
        return bool(readable)

    def events(self) -> Iterator[InputEvent]:
        """Yield logical events until the input stream closes.

        A trailing ESC, ESC[ or ESCO is held back while more input is on its
        way, so an arrow key split across reads is not taken for Esc.
        """
        pending = ""
        while True:
            chars = self.read_chars()
            if not chars:
                break
            pending += chars
            if ends_with_partial_escape(pending) and self.more_input_pending():
                continue
            yield from decode_keys(pending)
            pending = ""
        if pending:
            yield from decode_keys(pending)
