"""Declarative field schemas and the engine validating loosely-typed maps against them."""

from .constraints import (
    Constraint,
    ViolationKind,
    array_type,
    array_val,
    bool_type,
    each,
    email,
    int_type,
    iso_datetime,
    min_value,
    non_empty_string,
    string_type,
)
from .schema import FieldRule, FieldSchema, ValidationResult, Violation, key, validate

__all__ = [
    "Constraint",
    "FieldRule",
    "FieldSchema",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "array_type",
    "array_val",
    "bool_type",
    "each",
    "email",
    "int_type",
    "iso_datetime",
    "key",
    "min_value",
    "non_empty_string",
    "string_type",
    "validate",
]
