"""
register_decoder
================

Library for loading register map schemas and raw values, and decoding
register contents into named bit-fields.

Functions:
    - load_document: Read a JSON or YAML document
    - load_registers: Load the register schema
    - apply_values: Merge raw register values into loaded registers
    - trailing_zero_count: Lowest set bit index of a mask
    - get_field_value: Extract a field from a raw value
    - decode_fields: Decode every field of a register
"""

from .decode import (
    apply_values,
    decode_fields,
    get_field_value,
    load_document,
    load_registers,
    trailing_zero_count,
)
from .exceptions import (
    DocumentOpenError,
    DocumentParseError,
    MaskError,
    RegisterDecoderError,
    UnmatchedValueError,
)

__all__ = [
    "apply_values",
    "decode_fields",
    "get_field_value",
    "load_document",
    "load_registers",
    "trailing_zero_count",
    "DocumentOpenError",
    "DocumentParseError",
    "MaskError",
    "RegisterDecoderError",
    "UnmatchedValueError",
]
