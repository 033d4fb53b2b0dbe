from __future__ import annotations

from typing import List, Optional

from rich.text import Text

from menuclip.config import settings
from menuclip.menu.definitions import DETAIL_TEXT, TOP_OPTIONS, submenu_labels
from menuclip.menu.model import MenuState, Phase
from menuclip.ui.theme import (
    BL,
    BR,
    HOR,
    OPTION_STYLES,
    SELECTION_MARKER,
    SUBMENU_SELECTED_STYLE,
    SUBMENU_STYLE,
    TL,
    TR,
    VERT,
)


def center_text(text: str, width: int) -> str:
    """Center every physical line of ``text`` within ``width`` columns."""
    centered_lines = []
    for line in text.split("\n"):
        trimmed_line = line.strip()
        padding = max(0, (width - len(trimmed_line)) // 2)
        centered_lines.append(" " * padding + trimmed_line)
    return "\n".join(centered_lines)


def format_status(copy_status: str) -> str:
    if not copy_status:
        return "[ ]"
    return f"[ {copy_status} ]"


def _boxed_row(
    label: str,
    width: int,
    style: Optional[str] = None,
    marker: str = "",
) -> Text:
    line = center_text(f"{marker}{label}", width)[:width]
    body = Text(line.ljust(width))
    if style:
        label_start = len(line) - len(line.lstrip()) + len(marker)
        body.stylize(style, label_start, label_start + len(label))
    return Text.assemble(VERT, body, VERT)


def _top_rows(state: MenuState, width: int) -> List[Text]:
    rows = []
    for index, option in enumerate(TOP_OPTIONS):
        if index == state.top_cursor:
            rows.append(
                _boxed_row(option.value, width, OPTION_STYLES[option], SELECTION_MARKER)
            )
        else:
            rows.append(_boxed_row(option.value, width))
    return rows


def _submenu_rows(state: MenuState, width: int) -> List[Text]:
    rows = []
    for index, label in enumerate(submenu_labels(state.selected_option)):
        if index == state.sub_cursor:
            rows.append(_boxed_row(label, width, SUBMENU_SELECTED_STYLE, SELECTION_MARKER))
        else:
            rows.append(_boxed_row(label, width, SUBMENU_STYLE))
    return rows


def _detail_rows(state: MenuState, width: int) -> List[Text]:
    return [
        _boxed_row(DETAIL_TEXT, width),
        _boxed_row(format_status(state.copy_status), width),
    ]


def render(state: MenuState, width: Optional[int] = None) -> Text:
    """Render ``state`` as a bordered block.

    The box keeps the same width in every phase. Identical states render
    to equal Text values.
    """
    if width is None:
        width = settings.get_int("box_width", settings.DEFAULT_BOX_WIDTH)
    if state.phase is Phase.DETAIL:
        content = _detail_rows(state, width)
    elif state.phase is Phase.SUBMENU:
        content = _submenu_rows(state, width)
    else:
        content = _top_rows(state, width)
    spacing = Text(VERT + " " * width + VERT)
    lines = [
        Text(TL + HOR * width + TR),
        spacing,
        *content,
        spacing.copy(),
        Text(BL + HOR * width + BR),
    ]
    return Text("\n").join(lines)
