"""
common.models

Shared Pydantic models describing a register map document.

RegisterField:
    A named group of bits inside a register, located by a bit mask, with a
    human-readable description.

RegisterEntry:
    A register as declared in the schema: name, address and an ordered
    tuple of RegisterField entries. Keys other than those are ignored.

Register:
    A RegisterEntry plus the raw 32-bit value merged from the values document.
    Only `raw_value` may be assigned after construction.

RegisterSchema:
    The top-level schema document, a list of register entries under the
    `registers` key.
"""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

U32_MAX = 0xFFFFFFFF


class RegisterField(BaseModel):
    """
    RegisterField

    Attributes:
        name (str): Field identifier, expected to be unique within its register.
        mask (int): Unsigned 32-bit mask selecting the field's bits. Zero is
            accepted here and rejected when the field is decoded.
        description (str): Free-form text, used for display only.
    """

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    mask: StrictInt = Field(..., ge=0, le=U32_MAX)
    description: StrictStr


class RegisterEntry(BaseModel):
    """
    RegisterEntry

    Attributes:
        name (str): Lookup key into the values document.
        address (int): Unsigned 32-bit address, used for display only.
        fields (tuple[RegisterField, ...]): Fields in declaration order.
    """

    name: StrictStr = Field(..., frozen=True)
    address: StrictInt = Field(..., ge=0, le=U32_MAX, frozen=True)
    fields: Tuple[RegisterField, ...] = Field(..., frozen=True)


class Register(RegisterEntry):
    """
    Register

    Attributes:
        raw_value (int): Current raw content, 0 until a value is merged in.
    """

    model_config = ConfigDict(validate_assignment=True)

    raw_value: StrictInt = Field(0, ge=0, le=U32_MAX)

    @classmethod
    def from_entry(cls, entry: RegisterEntry) -> "Register":
        return cls(name=entry.name, address=entry.address, fields=entry.fields)


class RegisterSchema(BaseModel):
    """Top-level schema document."""

    registers: List[RegisterEntry]
