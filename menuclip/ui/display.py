"""Terminal output sink.

Every processed event triggers a full repaint of the menu box; there is no
diffing between frames.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text


class TerminalDisplay:
    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)

    def show(self, block: Text) -> None:
        self.console.clear()
        self.console.print(block, soft_wrap=True)
