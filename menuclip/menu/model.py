from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from menuclip.exceptions import InvalidMenuStateError


class Phase(Enum):
    TOP = "top"
    SUBMENU = "submenu"
    DETAIL = "detail"


class MenuOption(Enum):
    NONE = ""
    OCOR = "OCOR"
    CRAFT = "CRAFT"


class InputEvent(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    QUIT = "quit"


@dataclass(frozen=True)
class MenuState:
    """Position in the menu.

    Replaced, never mutated, on every input event.
    """

    top_cursor: int = 0
    sub_cursor: int = 0
    phase: Phase = Phase.TOP
    selected_option: MenuOption = MenuOption.NONE
    copy_status: str = ""

    def __post_init__(self) -> None:
        # Deferred: definitions imports this module.
        from menuclip.menu.definitions import SUBMENU_SIZE, TOP_OPTIONS

        if not 0 <= self.top_cursor < len(TOP_OPTIONS):
            raise InvalidMenuStateError("top_cursor", self.top_cursor)
        if not 0 <= self.sub_cursor < SUBMENU_SIZE:
            raise InvalidMenuStateError("sub_cursor", self.sub_cursor)
        if (self.phase is Phase.TOP) != (self.selected_option is MenuOption.NONE):
            raise InvalidMenuStateError("selected_option", self.selected_option)
        if self.copy_status and self.phase is not Phase.DETAIL:
            raise InvalidMenuStateError("copy_status", self.copy_status)
