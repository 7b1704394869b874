"""validate-arguments - validate your args."""

from .exceptions import ArgumentValidationError, SchemaLoadError, ValidateArgumentsError
from .guard import guard
from .schema import FieldSpec, Schema, normalize_schema
from .type_checks import TYPE_NAMES, is_of_type
from .validate import (
    ValidationResult,
    is_field_valid,
    named,
    positional,
    validate,
    validate_named,
    validate_object,
    validate_positional,
)

__version__ = "1.0.0"

__all__ = [
    "named",
    "positional",
    "validate",
    "validate_named",
    "validate_positional",
    "validate_object",
    "is_field_valid",
    "is_of_type",
    "TYPE_NAMES",
    "normalize_schema",
    "FieldSpec",
    "Schema",
    "ValidationResult",
    "guard",
    "ValidateArgumentsError",
    "ArgumentValidationError",
    "SchemaLoadError",
]
