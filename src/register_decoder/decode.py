"""
register_decoder.decode

Core decoding logic for register maps, including loading of the schema and
raw values documents.

Functions:
    - load_document: Reads a JSON or YAML document from disk
    - load_registers: Parses a schema document into an ordered list of Register
    - apply_values: Merges raw register values from a values document, in place
    - trailing_zero_count: Index of the lowest set bit of a mask
    - get_field_value: Extracts a field from a raw value using its mask
    - decode_fields: Decodes every field of a register in declaration order

Notes:
    - Documents with a `.yml` or `.yaml` suffix are read with PyYAML, everything
      else is read as JSON.
    - Raw values are interpreted as unsigned 32-bit integers.
"""

import json
import logging
import os
from typing import Any, List, Tuple

import yaml
from pydantic import ValidationError

from common.models import U32_MAX, Register, RegisterField, RegisterSchema

from .exceptions import DocumentOpenError, DocumentParseError, MaskError, UnmatchedValueError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yml", ".yaml")


def _format_validation_error(file_path: str, exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<root>"
        problems.append(f"{loc}: {err['msg']}")
    return f"{file_path}: " + "; ".join(problems)


def load_document(file_path: str) -> Any:
    """
    Read and parse a structured document.

    The file is opened, fully read and closed before parsing starts.

    Raises:
        DocumentOpenError: the file cannot be opened or read.
        DocumentParseError: the content is not a well-formed document.
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"{file_path}: {e}") from e
    except OSError as e:
        raise DocumentOpenError(file_path) from e

    is_yaml = os.path.splitext(file_path)[1].lower() in YAML_SUFFIXES
    try:
        if is_yaml:
            return yaml.safe_load(text)
        return json.loads(text)
    except (ValueError, RecursionError, yaml.YAMLError) as e:
        # ValueError covers JSONDecodeError and oversized integer literals.
        # YAML marks span several lines.
        message = " ".join(str(e).split())
        raise DocumentParseError(f"{file_path}: {message}") from e


def load_registers(file_path: str) -> List[Register]:
    """
    Load the register schema from `file_path`.

    Required keys are `registers`, and for every register `name`, `address`
    and `fields`, and for every field `name`, `mask` and `description`.
    Registers come back in declaration order with `raw_value` set to 0.
    """
    document = load_document(file_path)
    try:
        schema = RegisterSchema.model_validate(document)
    except ValidationError as e:
        raise DocumentParseError(_format_validation_error(file_path, e)) from e

    # Only name, address and fields are read from the schema; raw_value starts at 0.
    registers = [Register.from_entry(entry) for entry in schema.registers]
    logger.info(f"Loaded {len(registers)} registers from {file_path}")
    return registers


def apply_values(registers: List[Register], file_path: str, strict: bool = False) -> None:
    """
    Merge raw values from `file_path` into `registers`, in place.

    The document maps register names to integers. A register whose name is a
    key gets that value truncated to 32 bits; other registers keep their
    current value and unknown keys are ignored. With `strict`, any unknown
    key or register without a key raises UnmatchedValueError and nothing is
    modified.
    """
    document = load_document(file_path)
    if not isinstance(document, dict):
        raise DocumentParseError(
            f"{file_path}: expected a mapping of register names to values, "
            f"got {type(document).__name__}"
        )

    names = [reg.name for reg in registers]
    for name in names:
        if name not in document:
            continue
        value = document[name]
        # bool is an int subclass but never a register value
        if isinstance(value, bool) or not isinstance(value, int):
            raise DocumentParseError(
                f"{file_path}: value for '{name}' must be an integer, got {type(value).__name__}"
            )

    unknown_keys = [str(key) for key in document if key not in names]
    if strict:
        missing = [name for name in names if name not in document]
        if unknown_keys or missing:
            raise UnmatchedValueError(unknown_keys, missing)
    elif unknown_keys:
        logger.debug(f"Ignoring values for unknown registers: {unknown_keys}")

    for reg in registers:
        if reg.name in document:
            reg.raw_value = document[reg.name] & U32_MAX
        else:
            logger.debug(f"No value for register {reg.name}, keeping 0x{reg.raw_value:x}")


def trailing_zero_count(mask: int) -> int:
    """
    Return the index of the lowest set bit of `mask`.

    Raises MaskError for a zero mask, which has no set bit.
    """
    if mask == 0:
        raise MaskError("mask must be non-zero")
    return (mask & -mask).bit_length() - 1


def get_field_value(raw_value: int, mask: int) -> int:
    """
    Extract the bits of `raw_value` selected by `mask`, shifted down so the
    lowest bit of the mask lands at bit 0.
    """
    return (raw_value & mask) >> trailing_zero_count(mask)


def decode_fields(register: Register) -> List[Tuple[RegisterField, int]]:
    """
    Decode all fields of `register`:
      - returns (field, value) pairs in declaration order
      - raises MaskError naming the register and field for a zero mask
    """
    decoded = []
    for field in register.fields:
        try:
            value = get_field_value(register.raw_value, field.mask)
        except MaskError as e:
            raise MaskError(
                f"Field '{field.name}' of register '{register.name}' has a zero mask"
            ) from e
        decoded.append((field, value))
    return decoded
