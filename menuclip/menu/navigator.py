from __future__ import annotations

from dataclasses import replace
from typing import Callable

from menuclip.exceptions import QuitRequested
from menuclip.logging import LoggerFactory
from menuclip.menu.definitions import COPIED_STATUS, DETAIL_TEXT, SUBMENU_SIZE, TOP_OPTIONS
from menuclip.menu.model import InputEvent, MenuOption, MenuState, Phase

CopyText = Callable[[str], bool]

log = LoggerFactory.for_menu()
system_log = LoggerFactory.for_system()


def option_under_cursor(state: MenuState) -> MenuOption:
    return TOP_OPTIONS[state.top_cursor]


def move_selection(state: MenuState, delta: int) -> MenuState:
    """Move the cursor of the active phase, clamped to its list."""
    if state.phase is Phase.TOP:
        new_index = max(0, min(len(TOP_OPTIONS) - 1, state.top_cursor + delta))
        return replace(state, top_cursor=new_index)
    if state.phase is Phase.SUBMENU:
        new_index = max(0, min(SUBMENU_SIZE - 1, state.sub_cursor + delta))
        return replace(state, sub_cursor=new_index)
    return state


def confirm(state: MenuState, copy_text: CopyText) -> MenuState:
    if state.phase is Phase.TOP:
        return replace(
            state,
            phase=Phase.SUBMENU,
            selected_option=option_under_cursor(state),
            sub_cursor=0,
        )
    if state.phase is Phase.SUBMENU:
        return replace(state, phase=Phase.DETAIL, copy_status="")
    copied = copy_text(DETAIL_TEXT)
    return replace(state, copy_status=COPIED_STATUS if copied else "")


def cancel(state: MenuState) -> MenuState:
    if state.phase is Phase.DETAIL:
        return replace(state, phase=Phase.SUBMENU, copy_status="")
    if state.phase is Phase.SUBMENU:
        return replace(state, phase=Phase.TOP, selected_option=MenuOption.NONE)
    return state


def handle_event(state: MenuState, event: InputEvent, copy_text: CopyText) -> MenuState:
    """Compute the state that follows ``event``.

    Raises QuitRequested for InputEvent.QUIT; no state is produced in that case.
    """
    if event is InputEvent.QUIT:
        system_log.info(f"Quit requested in {state.phase.value} phase")
        raise QuitRequested()
    if event is InputEvent.MOVE_UP:
        new_state = move_selection(state, -1)
    elif event is InputEvent.MOVE_DOWN:
        new_state = move_selection(state, 1)
    elif event is InputEvent.CONFIRM:
        new_state = confirm(state, copy_text)
    else:
        new_state = cancel(state)
    log.debug(f"{event.value}: {state} -> {new_state}")
    return new_state
