from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import messages
from .lib.env import PATHS

LOG_DIR_MODE = 0o755

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


@dataclass(frozen=True)
class LogTargets:
    """Where setup output goes for the rest of the run.

    When the log files could not be created both paths point at os.devnull.
    """

    created: bool = False
    info_log: str = os.devnull
    general_log: str = os.devnull


NULL_TARGETS = LogTargets()


def configure_logging(level: int = logging.INFO, also_console: bool = False) -> logging.Logger:
    """Configure the root logger once.

    File output is attached later by attach_log_file(), after the log
    directory has been bootstrapped.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_pimcore_vsf_configured", False):
        return logger

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(console)
    else:
        # Keeps logging.lastResort from printing records to stderr before
        # the general log is attached.
        logger.addHandler(logging.NullHandler())

    setattr(logger, "_pimcore_vsf_configured", True)
    return logger


def attach_log_file(targets: LogTargets) -> logging.Handler:
    """Send log records to the general log, or drop them if it does not exist."""

    root = logging.getLogger()

    handler: logging.Handler
    if targets.created:
        handler = logging.FileHandler(targets.general_log, encoding="utf-8")
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    else:
        handler = logging.NullHandler()

    root.addHandler(handler)
    logging.getLogger(__name__).info(
        "Logging initialized (created=%s, general=%s, install=%s)",
        targets.created,
        targets.general_log,
        targets.info_log,
    )
    return handler


def bootstrap_log_files(log_dir: Optional[str] = None) -> LogTargets:
    """Create the log directory plus install.log and general.log.

    Never raises: on any failure a warning is printed and NULL_TARGETS is
    returned, so the setup continues without log files.
    """

    messages.info("Trying to create log files...")

    d = Path(log_dir or PATHS.log_dir).absolute()
    install_log = d / PATHS.install_log_name
    general_log = d / PATHS.general_log_name

    try:
        d.mkdir(mode=LOG_DIR_MODE, parents=True, exist_ok=True)
        for p in (install_log, general_log):
            p.touch(exist_ok=True)
            if not p.is_file():
                raise FileNotFoundError(str(p))
    except OSError as e:
        logging.getLogger(__name__).warning("Log bootstrap failed: %s", e)
        messages.warning("Can't create log files.")
        return NULL_TARGETS

    return LogTargets(created=True, info_log=str(install_log), general_log=str(general_log))


def install_excepthook() -> None:
    """Log uncaught exceptions before the default hook prints them."""

    previous = sys.excepthook

    def _hook(exc_type, exc, tb):
        if not issubclass(exc_type, KeyboardInterrupt):
            logging.getLogger(__name__).critical("Unhandled exception", exc_info=(exc_type, exc, tb))
        previous(exc_type, exc, tb)

    sys.excepthook = _hook
