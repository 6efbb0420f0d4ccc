"""
Text report for decoded registers.

Each register is rendered as:

    Register: CTRL (0x40)
    RAW Value: 0x5
     ENABLE: 0x1 (enable bit)
     MODE: 0x2 (mode select)

followed by a blank line. Hex values are lowercase and not zero-padded.
"""

import sys
from typing import Iterable, Optional, TextIO

from common.models import Register
from register_decoder import decode_fields


def format_register(register: Register) -> str:
    lines = [
        f"Register: {register.name} (0x{register.address:x})",
        f"RAW Value: 0x{register.raw_value:x}",
    ]
    for field, value in decode_fields(register):
        lines.append(f" {field.name}: 0x{value:x} ({field.description})")
    return "\n".join(lines) + "\n\n"


def format_report(registers: Iterable[Register]) -> str:
    """Render every register in order; raises MaskError before returning anything."""
    return "".join(format_register(reg) for reg in registers)


def print_report(registers: Iterable[Register], stream: Optional[TextIO] = None) -> None:
    """
    Write the report for `registers` to `stream` (stdout by default).

    The whole report is rendered before the first write, so a decoding error
    leaves the stream untouched.
    """
    report = format_report(registers)
    out = stream if stream is not None else sys.stdout
    out.write(report)
    out.flush()
