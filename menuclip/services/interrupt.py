"""Interrupt listener.

Runs one background thread whose only job is to end the process when
SIGINT or SIGTERM arrives. The signal handlers only set a one-shot event;
the listener thread does the exit. Exit is abrupt: no menu state is
cleaned up and control never returns to the event loop.
"""

from __future__ import annotations

import os
import signal
import threading
from typing import Callable, Optional

from menuclip.logging import LoggerFactory

HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)

log = LoggerFactory.for_system()


class InterruptListener:
    def __init__(
        self,
        farewell: str,
        before_exit: Optional[Callable[[], None]] = None,
        exit_func: Callable[[int], None] = os._exit,
    ) -> None:
        self.farewell = farewell
        self._before_exit = before_exit
        self._exit = exit_func
        self._event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def triggered(self) -> bool:
        return self._event.is_set()

    def start(self) -> None:
        """Install signal handlers and start the listener thread.

        Must be called from the main thread.
        """
        for signum in HANDLED_SIGNALS:
            signal.signal(signum, self._handle_signal)
        self._thread = threading.Thread(
            target=self._wait_and_exit, name="interrupt-listener", daemon=True
        )
        self._thread.start()

    def notify(self) -> None:
        self._event.set()

    def _handle_signal(self, _signum, _frame) -> None:
        self.notify()

    def _wait_and_exit(self) -> None:
        self._event.wait()
        log.info("Interrupt received, exiting")
        if self._before_exit is not None:
            self._before_exit()
        print(self.farewell, flush=True)
        self._exit(0)
