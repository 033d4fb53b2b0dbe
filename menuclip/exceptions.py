"""Custom exceptions for the menu navigator.

Exception Hierarchy:
    MenuClipError (base)
        ├── TerminalUnavailableError
        ├── InvalidMenuStateError
        └── QuitRequested

Usage:
    from menuclip.exceptions import QuitRequested

    try:
        state = handle_event(state, event, copy_text)
    except QuitRequested:
        return
"""


class MenuClipError(Exception):
    """Base exception for all menuclip errors."""


class TerminalUnavailableError(MenuClipError):
    """The terminal could not be prepared for interactive input."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Terminal unavailable: {reason}")


class InvalidMenuStateError(MenuClipError):
    """A menu state was built with values outside its domain."""

    def __init__(self, field_name: str, value: object):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Invalid menu state: {field_name}={value!r}")


class QuitRequested(MenuClipError):
    """Raised by the navigator when the user asks to quit.

    No further menu state is produced once this is raised.
    """

    def __init__(self) -> None:
        super().__init__("Quit requested")
