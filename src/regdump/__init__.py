"""
regdump

Command-line tool that decodes raw hardware register values into named
bit-fields described by a register map schema.

Modules:
    - config: Logging setup and environment-driven settings
    - main: Command-line entry point (`regdump.main:main`)
    - report: Text rendering of decoded registers
"""

from ._version import VERSION
from .config import configure_logger, get_strict_mode
from .report import format_register, format_report, print_report

__all__ = [
    "VERSION",
    "configure_logger",
    "get_strict_mode",
    "format_register",
    "format_report",
    "print_report",
]
