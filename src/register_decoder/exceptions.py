"""
register_decoder.exceptions

Error kinds raised while loading, merging and decoding register documents.
All of them derive from RegisterDecoderError so a caller can handle the
whole family in one place.
"""


class RegisterDecoderError(Exception):
    """Base class for every error raised by register_decoder."""


class DocumentOpenError(RegisterDecoderError, OSError):
    """An input document could not be opened or read."""

    def __init__(self, file_path: str):
        super().__init__(f"Could not open file: {file_path}")
        self.file_path = file_path


class DocumentParseError(RegisterDecoderError, ValueError):
    """An input document is malformed, lacks a required key or has a value of the wrong type."""


class MaskError(RegisterDecoderError, ValueError):
    """A field mask is zero, so no bit position can be derived from it."""


class UnmatchedValueError(RegisterDecoderError):
    """Strict merge found value keys without a register, or registers without a value."""

    def __init__(self, unknown_keys: list[str], missing_registers: list[str]):
        parts = []
        if unknown_keys:
            parts.append(f"unknown register names in values: {', '.join(unknown_keys)}")
        if missing_registers:
            parts.append(f"registers without a value: {', '.join(missing_registers)}")
        super().__init__("; ".join(parts))
        self.unknown_keys = unknown_keys
        self.missing_registers = missing_registers
