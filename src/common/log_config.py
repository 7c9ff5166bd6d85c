"""
Logging Configuration

Routes the inventory tools' log records to stderr so that stdout carries
only the tables and CSV paths the merchant asked for.
"""

import logging
import sys

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"

# Third-party loggers that are noisy at DEBUG/INFO
CHATTY_LOGGERS = ("urllib3",)


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the --verbose/--quiet CLI flags to a logging level."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure the ``src`` logger hierarchy.

    Args:
        verbose: If True, set level to DEBUG and let HTTP connection logs through
        quiet: If True, only warnings and errors are shown

    Returns:
        The configured root logger of the package
    """
    level = resolve_level(verbose=verbose, quiet=quiet)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("src")
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    logger.handlers.clear()
    logger.addHandler(handler)

    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)

    return logger
