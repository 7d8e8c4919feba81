"""Logging utilities for jira-wrapper.

The library logs through named loggers and never installs handlers on import
unless verbose mode is requested. Handlers are only ever attached to the
library's own loggers; the host application's root logger is left alone.
"""

import logging

LIBRARY_LOGGERS = ("jira-wrapper", "jira_wrapper")


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure jira-wrapper logging.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The configured logger instance
    """
    formatter = logging.Formatter("%(levelname)s - %(name)s - %(message)s")

    for logger_name in LIBRARY_LOGGERS:
        library_logger = logging.getLogger(logger_name)
        library_logger.setLevel(level)

        # Remove handlers from an earlier call to prevent duplication
        for handler in library_logger.handlers[:]:
            library_logger.removeHandler(handler)

        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        library_logger.addHandler(handler)

    return logging.getLogger("jira-wrapper")


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks sensitive strings for logging.

    Args:
        value: The string to mask
        keep_chars: Number of characters to keep visible at start and end

    Returns:
        Masked string with most characters replaced by asterisks
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}{'*' * (len(value) - keep_chars * 2)}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Logs a Jira configuration parameter, masking it if sensitive.

    Args:
        logger: The logger to use
        param: The parameter name
        value: The parameter value
        sensitive: Whether the value should be masked
    """
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"Jira {param}: {display_value}")
