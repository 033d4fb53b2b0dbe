import sys
import time
from typing import Iterable

from menuclip.config import settings
from menuclip.exceptions import QuitRequested, TerminalUnavailableError
from menuclip.logging import LoggerFactory, setup_logging
from menuclip.menu import InputEvent, MenuState, handle_event
from menuclip.menu.navigator import CopyText
from menuclip.services.clipboard import copy_to_clipboard
from menuclip.services.interrupt import InterruptListener
from menuclip.ui.display import TerminalDisplay
from menuclip.ui.keyboard import TerminalKeyboard
from menuclip.ui.renderer import render


def run_menu(
    events: Iterable[InputEvent],
    display: TerminalDisplay,
    copy_text: CopyText = copy_to_clipboard,
) -> MenuState:
    """Process events one at a time, repainting after each.

    Returns the last state shown when the user quits or input ends.
    """
    state = MenuState()
    display.show(render(state))
    for event in events:
        try:
            state = handle_event(state, event, copy_text)
        except QuitRequested:
            break
        display.show(render(state))
    return state


def main() -> None:
    setup_logging()
    log = LoggerFactory.for_system()

    keyboard = TerminalKeyboard()
    listener = InterruptListener(
        settings.get_setting("farewell_message", settings.DEFAULT_FAREWELL_MESSAGE),
        before_exit=keyboard.restore,
    )
    listener.start()

    time.sleep(settings.get_float("startup_delay", settings.DEFAULT_STARTUP_DELAY))

    try:
        with keyboard:
            log.info("Menu started")
            run_menu(keyboard.events(), TerminalDisplay())
    except TerminalUnavailableError as error:
        log.error(str(error))
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)
    log.info("Menu closed")


if __name__ == "__main__":
    main()
