"""
Logging configuration for wire message intake.
Account numbers are masked before records reach any handler.
"""
import logging
import os
import re
import sys
from typing import Optional

# Routing numbers are 9 digits and stay readable; longer runs are treated as account numbers
ACCOUNT_NUMBER_PATTERN = re.compile(r"\d{10,}")


def mask_account_numbers(text: str) -> str:
    """Replace all but the last 4 digits of long digit runs with '*'."""
    return ACCOUNT_NUMBER_PATTERN.sub(lambda m: "*" * (len(m.group()) - 4) + m.group()[-4:], text)


class AccountNumberRedactionFilter(logging.Filter):
    """Mask account-number-like digit runs in the formatted message."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = mask_account_numbers(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env LOG_LEVEL or INFO.

    Returns:
        Configured logger instance
    """
    log_level = level or os.getenv("LOG_LEVEL", "INFO")

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Avoid duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(getattr(logging, log_level.upper()))
        handler.addFilter(AccountNumberRedactionFilter())

        formatter = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
