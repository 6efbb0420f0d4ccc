#!/usr/bin/env python3
"""
Command-line entry point for regdump.

Usage:
    regdump <registers.json> <values.json>

Loads the register schema, merges the raw values, and prints every register
with its decoded fields. Exits with status 0 on success and 1 on a usage,
I/O, parse or decoding error, after printing a one-line diagnosis to stderr.
"""
import logging
import os
import sys
from typing import List, Optional

from register_decoder import (
    DocumentParseError,
    RegisterDecoderError,
    apply_values,
    load_registers,
)
from regdump.config import configure_logger, get_strict_mode
from regdump.report import print_report

logger = logging.getLogger(__name__)


def usage(prog: str) -> str:
    return f"Usage: {prog} <registers.json> <values.json>"


def run(schema_file_path: str, values_file_path: str, strict: bool = False) -> None:
    """Loads the schema, merges the values and prints the report, once."""
    registers = load_registers(schema_file_path)
    apply_values(registers, values_file_path, strict=strict)
    print_report(registers)


# ── Entrypoint ─────────────────────────────────────────────────────────────
def main(argv: Optional[List[str]] = None) -> int:
    """
    Parses the command line, runs the pipeline and maps errors to exit codes.

    Args:
        argv: Full argument vector including the program name. Defaults to sys.argv.

    Returns:
        int: Process exit status.
    """
    if argv is None:
        argv = sys.argv
    prog = os.path.basename(argv[0]) if argv else "regdump"

    if len(argv) != 3:
        print(usage(prog), file=sys.stderr)
        return 1

    configure_logger()
    schema_file_path, values_file_path = argv[1], argv[2]
    strict = get_strict_mode()
    logger.debug(
        f"Decoding {values_file_path} against {schema_file_path} (strict merge: {strict})"
    )

    try:
        run(schema_file_path, values_file_path, strict=strict)
    except DocumentParseError as e:
        logger.debug("Parse failure", exc_info=True)
        print(f"Error parsing document: {e}", file=sys.stderr)
        return 1
    except RegisterDecoderError as e:
        logger.debug("Decoding failure", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
