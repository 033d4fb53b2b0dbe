from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger

from menuclip.config import settings

LOG_FILE_NAME = "menuclip.log"


def _should_log_navigation(record) -> bool:
    """Keep per-keystroke navigation logs out of the file unless they are warnings."""
    tags = record["extra"].get("tags", [])

    if "navigation" in tags:
        return record["level"].no >= logger.level("WARNING").no

    return True


def setup_logging(*, debug: bool = False, log_dir: Path | None = None) -> Logger:
    """
    Setup file logging for the menu.

    The terminal belongs to the menu, so nothing is logged to stdout or
    stderr. All records go to a rotating file sink. If the log directory
    cannot be created or opened the menu runs without a log file.

    Log Files:
    - menuclip.log: INFO+ events, DEBUG+ when debug is enabled (3 day retention)

    Args:
        debug: Enable DEBUG level logging
        log_dir: Custom log directory (defaults to ~/.local/state/menuclip/logs)
    """
    logger.remove()
    logger.configure(extra={"tags": [], "source": "APP"})

    file_level = "DEBUG" if debug else "INFO"

    log_dir = log_dir or Path(settings.get_setting("log_dir"))
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / LOG_FILE_NAME,
            level=file_level,
            rotation="1 MB",
            retention="3 days",
            enqueue=False,
            backtrace=debug,
            diagnose=debug,
            filter=None if debug else _should_log_navigation,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
                "{level: <8} | "
                "{extra[source]: <10} | "
                "{message}"
            ),
        )
    except OSError:
        return logger

    return logger


def get_logger(
    *,
    tags: Iterable[str] | None = None,
    source: str | None = None,
) -> Logger:
    """
    Get a logger with bound context.

    Args:
        tags: Tags for filtering (e.g., ["ui", "navigation"])
        source: Source component (e.g., "menu", "clipboard")

    Returns:
        Logger with bound context
    """
    extras: dict[str, object] = {}
    if tags is not None:
        extras["tags"] = list(tags)
    if source is not None:
        extras["source"] = source
    return logger.bind(**extras)


class LoggerFactory:
    """
    Factory for creating domain-specific loggers with automatic context.
    """

    @staticmethod
    def for_menu() -> Logger:
        """Logger for menu navigation and UI operations."""
        return logger.bind(source="menu", tags=["ui", "navigation"])

    @staticmethod
    def for_clipboard() -> Logger:
        """Logger for clipboard writes."""
        return logger.bind(source="clipboard", tags=["clipboard"])

    @staticmethod
    def for_system() -> Logger:
        """Logger for system operations (startup, shutdown, signals)."""
        return logger.bind(source="system", tags=["system"])
