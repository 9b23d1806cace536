"""Console logging for lessonsync.

Modules log through ``get_logger(__name__)``, which only names the logger.
Handlers are attached by ``setup_logging``, called once from ``cli.main``;
used as a library, lessonsync leaves logging configuration to the caller.
"""
import logging
import sys

from colorama import Fore, Style

__all__ = ["get_logger", "setup_logging", "LOGGER_NAME"]

LOGGER_NAME = "lessonsync"

_TAG_COLOURS = {
    logging.DEBUG: Fore.WHITE,
    logging.INFO: Fore.CYAN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.RED + Style.BRIGHT,
}


class ColouredFormatter(logging.Formatter):
    """Prefix each record with a coloured ``[LEVEL]`` tag."""

    def format(self, record: logging.LogRecord) -> str:
        tag = f"{_TAG_COLOURS.get(record.levelno, '')}[{record.levelname}]{Style.RESET_ALL}"
        return f"{tag} {super().format(record)}"


def _level_for(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.WARNING
    return logging.DEBUG if verbose else logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Attach the stderr console handler to the *lessonsync* logger.

    Safe to call more than once: later calls only change the level.

    Args:
        verbose: Show per-request ``DEBUG`` lines.
        quiet: Only warnings and errors (wins over *verbose*).

    Returns:
        The configured *lessonsync* logger.
    """
    level = _level_for(verbose, quiet)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    console = [h for h in logger.handlers if isinstance(h.formatter, ColouredFormatter)]
    if not console:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColouredFormatter("%(message)s"))
        logger.addHandler(handler)
        console = [handler]

    for handler in console:
        handler.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the *lessonsync* namespace. No handlers are added."""
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
