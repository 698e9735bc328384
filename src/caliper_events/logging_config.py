"""
Logging for caliper-events.

Every module logs through ``get_logger(__name__)`` so records land under the
``caliper_events`` logger. ``setup_logging`` attaches rich output to that
logger only; the root logger belongs to the host application.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "caliper_events"

# Marks handlers installed by setup_logging so a second call replaces them
_HANDLER_FLAG = "_caliper_events_handler"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Attach a rich stderr handler (and optionally a file handler) to the
    caliper_events logger.

    Args:
        verbose: Enable DEBUG level logging, with source paths and locals in tracebacks
        quiet: Only ERROR level and above
        log_file: Optional file path to append plain-text records to

    Returns:
        The configured caliper_events logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_FLAG, False)]:
        logger.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_path=verbose,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    handlers: list[logging.Handler] = [rich_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    for handler in handlers:
        setattr(handler, _HANDLER_FLAG, True)
        logger.addHandler(handler)

    logger.setLevel(level)
    # Our handlers already print; don't echo through the application's root handlers
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return the logger for a module, nested under caliper_events.

    ``get_logger("compare")`` and ``get_logger("caliper_events.compare")``
    return the same logger.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
