"""Clipboard access.

Uses pyperclip for cross-platform clipboard access. A failed write is not
escalated: callers only learn whether the text was copied.
"""

from __future__ import annotations

import pyperclip

from menuclip.logging import LoggerFactory

log = LoggerFactory.for_clipboard()


def copy_to_clipboard(text: str) -> bool:
    """Copy text to the system clipboard.

    Args:
        text: The text to copy.

    Returns:
        True if the text was copied, False if clipboard access failed.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as error:
        log.debug(f"Clipboard write failed: {error}")
        return False
    log.debug(f"Copied {len(text)} characters to clipboard")
    return True
