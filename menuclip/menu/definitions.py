"""Fixed menu content."""

from __future__ import annotations

from typing import List

from menuclip.menu.model import MenuOption

TOP_OPTIONS = (MenuOption.OCOR, MenuOption.CRAFT)
SUBMENU_SIZE = 5

DETAIL_TEXT = "custom template"
COPIED_STATUS = "Text copied to clipboard"


def submenu_labels(option: MenuOption) -> List[str]:
    return [f"{option.value} {index}" for index in range(1, SUBMENU_SIZE + 1)]
