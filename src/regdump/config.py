"""
Handles runtime configuration for the regdump command.

This module is responsible for:
- Configuring logging for the application (coloredlogs on the root logger, stderr).
- Reading behaviour switches from environment variables:
    - LOG_LEVEL: level name for diagnostic logging (default WARNING)
    - REGDUMP_STRICT: enables strict merging of the values document
"""

import logging
import os

import coloredlogs

# ── Logging Configuration ──────────────────────────────────────────────────
# This logger is for messages originating from the config.py module itself.
module_logger = logging.getLogger(__name__)

TRUTHY_VALUES = ("1", "true", "yes", "on")


def configure_logger():
    root_logger = logging.getLogger()
    log_level_str = os.getenv("LOG_LEVEL", "WARNING").upper()

    log_level_int = getattr(logging, log_level_str, None)
    if not isinstance(log_level_int, int):
        module_logger.warning(f"Invalid LOG_LEVEL '{log_level_str}'. Defaulting to WARNING.")
        log_level_int = logging.WARNING

    log_format = "%(asctime)s %(name)s[%(process)d] %(levelname)s %(message)s"

    root_logger.setLevel(logging.DEBUG)

    # Drop handlers left by earlier calls so records are not emitted twice.
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    # coloredlogs writes to stderr, keeping stdout for the report.
    coloredlogs.install(
        level=log_level_int,
        fmt=log_format,
        logger=root_logger,
        reconfigure=True,
    )

    return root_logger


# ── Merge Configuration ────────────────────────────────────────────────────
def get_strict_mode():
    """
    Reports whether strict merging is requested via REGDUMP_STRICT.

    Returns:
        bool: True when REGDUMP_STRICT is one of 1/true/yes/on (any case).
    """
    return os.getenv("REGDUMP_STRICT", "").strip().lower() in TRUTHY_VALUES
