from menuclip.menu.definitions import (
    COPIED_STATUS,
    DETAIL_TEXT,
    SUBMENU_SIZE,
    TOP_OPTIONS,
    submenu_labels,
)
from menuclip.menu.model import InputEvent, MenuOption, MenuState, Phase
from menuclip.menu.navigator import handle_event

__all__ = [
    "COPIED_STATUS",
    "DETAIL_TEXT",
    "SUBMENU_SIZE",
    "TOP_OPTIONS",
    "InputEvent",
    "MenuOption",
    "MenuState",
    "Phase",
    "handle_event",
    "submenu_labels",
]
