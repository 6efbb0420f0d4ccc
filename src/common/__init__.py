"""
common

This package contains the shared document models used across the regdump project.

Modules:
    - models: Pydantic models for registers, their fields and the schema document
"""

from .models import U32_MAX, Register, RegisterEntry, RegisterField, RegisterSchema

__all__ = ["U32_MAX", "Register", "RegisterEntry", "RegisterField", "RegisterSchema"]
