# storefront/config/logging_config.py

"""Per-run timestamped logging configuration for the storefront browser.

Each application launch creates a dedicated log file inside ``logs/``,
named with the launch timestamp (e.g. ``logs/run_20260214_153045.log``).
All ``storefront.*`` loggers route through this file handler so that
sheet fetches, catalog fallbacks and view transitions from one session
land in the same file.

While the terminal UI runs, a :class:`NotifyHandler` also forwards
``storefront.*`` errors (a sheet that failed to download, a shop that
failed to load) to the app as toast notifications, since the console
handler is hidden behind the full-screen UI.
"""

import logging
import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from storefront.config.settings import Settings

# Reusable format strings --------------------------------------------------

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ROOT_LOGGER = "storefront"


class NotifyHandler(logging.Handler):
    """Forward log records to a UI ``notify(message, title=, severity=)``."""

    def __init__(
        self,
        notify: Callable[..., Any],
        level: int = logging.ERROR,
    ) -> None:
        super().__init__(level)
        self._notify = notify

    def emit(self, record: logging.LogRecord) -> None:
        try:
            severity = (
                "error" if record.levelno >= logging.ERROR else "warning"
            )
            # Drop the "storefront." prefix for a short toast title
            title = record.name.removeprefix(f"{_ROOT_LOGGER}.")
            self._notify(
                record.getMessage(), title=title, severity=severity
            )
        except Exception:
            self.handleError(record)


def attach_notify_handler(
    notify: Callable[..., Any], level: int = logging.ERROR,
) -> NotifyHandler:
    """Install a :class:`NotifyHandler` on the ``storefront`` logger."""
    handler = NotifyHandler(notify, level)
    logging.getLogger(_ROOT_LOGGER).addHandler(handler)
    return handler


def detach_notify_handler(handler: NotifyHandler) -> None:
    """Remove a handler installed by :func:`attach_notify_handler`."""
    logging.getLogger(_ROOT_LOGGER).removeHandler(handler)


def setup_logging(logs_dir: Path | None = None) -> Path:
    """Initialise the root ``storefront`` logger for the current run.

    Args:
        logs_dir: Directory for the run file; defaults to
            ``Settings.LOGS_DIR``.

    Returns:
        The :class:`~pathlib.Path` to the log file created for this run.
    """
    logs_dir = logs_dir or Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"run_{timestamp}.log"

    root_logger = logging.getLogger(_ROOT_LOGGER)
    root_logger.setLevel(logging.DEBUG)

    # A notify handler may already be attached; only the run file counts
    if any(
        isinstance(h, logging.FileHandler) for h in root_logger.handlers
    ):
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info("Logging initialised, log file: %s", log_file)

    return log_file
