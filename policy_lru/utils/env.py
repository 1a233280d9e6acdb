"""Logging setup helpers."""

import logging
import sys

from ..config import DEFAULT_LOGGER_NAME, LOG_FORMAT, LOG_DATE_FORMAT

# Tags handlers installed here so a repeat call can swap them out
_OWNED = "_policy_lru_owned"


def setup_logging(
    level: int = logging.DEBUG,
    log_file: str | None = None,
    logger_name: str = DEFAULT_LOGGER_NAME,
) -> logging.Logger:
    """Make cache events visible on stderr and, optionally, in a file.

    Only the library's logger hierarchy is configured; the root logger and
    any handlers the application installed itself are left alone. Calling
    this again replaces the handlers from the previous call.

    Args:
        level: Level for the library logger
        log_file: Path to log file (None to disable file logging)
        logger_name: Logger to configure

    Returns:
        The configured logger
    """
    lib_logger = logging.getLogger(logger_name)
    for handler in [h for h in lib_logger.handlers if getattr(h, _OWNED, False)]:
        lib_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))
        except OSError as e:
            file_error = e

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _OWNED, True)
        lib_logger.addHandler(handler)
    lib_logger.setLevel(level)

    if file_error is not None:
        # Console-only is still useful
        lib_logger.warning(f"Could not open log file '{log_file}': {file_error}")
    return lib_logger
