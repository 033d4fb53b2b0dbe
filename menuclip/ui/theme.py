"""Theme definitions for the menu box.

Central place for highlight styles and box-drawing characters.
"""

from typing import Dict

from rich import box

from menuclip.menu.model import MenuOption

# Fixed highlight per top-level option, independent of cursor position
OPTION_STYLES: Dict[MenuOption, str] = {
    MenuOption.OCOR: "blue",
    MenuOption.CRAFT: "red",
}

# Submenu rows are colored by selection instead of by option
SUBMENU_STYLE = "green"
SUBMENU_SELECTED_STYLE = "yellow"

SELECTION_MARKER = "> "

# Box-drawing characters for borders
TL = box.ROUNDED.top_left  # ╭
TR = box.ROUNDED.top_right  # ╮
BL = box.ROUNDED.bottom_left  # ╰
BR = box.ROUNDED.bottom_right  # ╯
HOR = box.ROUNDED.top
VERT = box.ROUNDED.head_left

__all__ = [
    "OPTION_STYLES",
    "SUBMENU_STYLE",
    "SUBMENU_SELECTED_STYLE",
    "SELECTION_MARKER",
    "TL",
    "TR",
    "BL",
    "BR",
    "HOR",
    "VERT",
]
