"""Logging utilities for component_docs commands."""

from __future__ import annotations

import logging

_LOGGER_NAME = "component_docs"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the component_docs hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Configure the package logger with a single console handler.

    Parameters
    ----------
    verbose : bool, optional
        Emit DEBUG records (per-folder discoveries, per-page writes) when
        ``True``; otherwise only INFO and above are shown.

    Returns
    -------
    logging.Logger
        The configured ``component_docs`` logger.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(
        logging.Formatter("[component-docs] %(levelname)s %(message)s")
    )
    logger.addHandler(stream_handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
