"""Validation engine: match values against a schema and report failures."""
from __future__ import annotations

import logging
import warnings as _warnings
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Callable

from .exceptions import ArgumentValidationError
from .schema import (
    FieldSpec,
    InstanceOf,
    NestedSchema,
    Schema,
    TypeName,
    describe_constraint,
    normalize_field,
    normalize_schema,
)
from .type_checks import is_empty, is_of_type

logger = logging.getLogger(__name__)

MISSING_SPEC = "missing validation spec"
MISSING_NAMED_ARGUMENTS = "missing named arguments"
MISSING_POSITIONAL_ARGUMENTS = "missing positional arguments"


def _is_positional_values(values: Any) -> bool:
    # any ordered sequence except text
    return isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray))


def _format_error(prefix: str, value: Any, key: Any, spec: FieldSpec) -> str:
    if is_empty(value):
        return f"missing {prefix} argument {key}"
    return f'{prefix} argument {key} is not a "{describe_constraint(spec.isa)}"'


class ValidationResult:
    """Outcome of one validation call.

    Holds the keys that failed (in schema order), the values as given and the
    normalized schema. Never modified after construction.
    """

    def __init__(
        self,
        invalid_keys: list[Any],
        values: Any = None,
        schema: Mapping[Any, FieldSpec] | None = None,
        *,
        structural: bool = False,
    ):
        self._invalid_keys = tuple(invalid_keys)
        self._values = values
        self._schema = MappingProxyType(dict(schema or {}))
        self._structural = structural

    @classmethod
    def structural_error(cls, message: str) -> ValidationResult:
        """A result for input that never reached field checks."""
        return cls([message], structural=True)

    def is_valid(self) -> bool:
        return len(self._invalid_keys) == 0

    def errors(self) -> list[Any]:
        return list(self._invalid_keys)

    def get(self, key: Any) -> Any:
        values = self._values
        if isinstance(values, Mapping):
            return values.get(key)
        if _is_positional_values(values) and isinstance(key, int):
            if 0 <= key < len(values):
                return values[key]
        return None

    def values(self) -> list[Any]:
        if isinstance(self._values, Mapping):
            return list(self._values.values())
        if _is_positional_values(self._values):
            return list(self._values)
        return []

    def error_string(self) -> str:
        """Human-readable summary of every failed field, comma separated."""
        if self._structural:
            return self._invalid_keys[0]

        prefix = "named" if isinstance(self._values, Mapping) else "positional"
        return ", ".join(
            _format_error(prefix, self.get(key), key, self._schema[key])
            for key in self._invalid_keys
        )

    def raise_on_error(self) -> None:
        if not self.is_valid():
            raise ArgumentValidationError(self.error_string(), result=self)

    def __bool__(self) -> bool:
        return self.is_valid()

    def __repr__(self) -> str:
        if self.is_valid():
            return "<ValidationResult: Valid>"
        return f"<ValidationResult: {len(self._invalid_keys)} errors>"


def is_field_valid(value: Any, field_spec: Any) -> bool:
    """Check a single value against a single (possibly shorthand) field spec."""
    spec = normalize_field(field_spec)
    if value is None:
        return spec.optional

    isa = spec.isa
    if isinstance(isa, TypeName):
        return is_of_type(value, isa.name)
    if isinstance(isa, NestedSchema):
        return validate_named(value, isa.fields).is_valid()
    if isinstance(isa, InstanceOf):
        return isinstance(value, isa.cls)
    return False


def _check_fields(
    values: Any,
    fields: Mapping[Any, FieldSpec],
    lookup: Callable[[Any], Any],
    mode: str,
) -> ValidationResult:
    invalid = [key for key, spec in fields.items() if not is_field_valid(lookup(key), spec)]
    if invalid:
        logger.debug(
            "Argument validation failed",
            extra={"invalid_keys": invalid, "mode": mode},
        )
    return ValidationResult(invalid, values, fields)


def validate_named(values: Any, schema: Any) -> ValidationResult:
    """Validate a mapping of named values.

    Only keys declared in ``schema`` are checked; extra keys in ``values``
    are ignored.
    """
    if not isinstance(values, Mapping):
        return ValidationResult.structural_error(MISSING_NAMED_ARGUMENTS)

    fields = normalize_schema(schema)
    if not fields:
        return ValidationResult.structural_error(MISSING_SPEC)

    return _check_fields(values, fields, values.get, "named")


def validate_positional(values: Any, schema: Any) -> ValidationResult:
    """Validate an ordered sequence (e.g. a function's ``*args``) by index.

    Strings and bytes are not positional values. Indices past the end of
    ``values`` count as absent. A named ``Schema`` has no positional fields
    and is reported as "missing validation spec".
    """
    if not _is_positional_values(values):
        return ValidationResult.structural_error(MISSING_POSITIONAL_ARGUMENTS)
    if isinstance(schema, Schema) and not schema.is_positional:
        return ValidationResult.structural_error(MISSING_SPEC)

    fields = normalize_schema(schema)
    if not fields:
        return ValidationResult.structural_error(MISSING_SPEC)

    def lookup(index: Any) -> Any:
        if isinstance(index, int) and 0 <= index < len(values):
            return values[index]
        return None

    return _check_fields(values, fields, lookup, "positional")


def named(values: Any, schema: Any) -> ValidationResult:
    """Validate named values; ``schema`` may use any shorthand.

    Example:
        >>> named({"name": "Ada", "age": 36}, {"name": "string", "age": "natural"})
        <ValidationResult: Valid>
    """
    return validate_named(values, normalize_schema(schema))


def positional(values: Any, *schema: Any) -> ValidationResult:
    """Validate positional values.

    The schema may be given as one list, ``positional(args, ["string", "whole"])``,
    or spread over the remaining arguments, ``positional(args, "string", "whole")``.
    """
    if len(schema) == 1 and isinstance(schema[0], (list, tuple, Schema)):
        spec = schema[0]
    else:
        spec = list(schema)
    return validate_positional(values, spec)


def validate(values: Any, schema: Any) -> ValidationResult:
    """Freeform validation, picking the mode from the schema's shape.

    A bare type name is a one-element positional schema; a list or tuple is a
    positional schema; anything else is treated as a named schema.
    """
    if isinstance(schema, Schema):
        return schema.validate(values)
    if isinstance(schema, str):
        if not schema:
            return ValidationResult.structural_error(MISSING_SPEC)
        return validate_positional(values, [schema])
    if isinstance(schema, (list, tuple)):
        return validate_positional(values, schema)
    return validate_named(values, schema)


def validate_object(values: Any, schema: Any) -> ValidationResult:
    """Deprecated alias of :func:`named`."""
    _warnings.warn(
        "validate_object() is deprecated, use named() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return named(values, schema)
