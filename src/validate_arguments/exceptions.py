"""Typed exceptions for validate-arguments."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .validate import ValidationResult


class ValidateArgumentsError(Exception):
    """Base exception for all validate-arguments errors."""


class ArgumentValidationError(ValidateArgumentsError, ValueError):
    """Arguments did not match their schema.

    Only raised on request, by ``ValidationResult.raise_on_error()`` or a
    ``guard``-ed function. Plain validation calls never raise.
    """

    def __init__(self, message: str, *, result: ValidationResult | None = None) -> None:
        super().__init__(message)
        self.result = result

    @property
    def errors(self) -> list[Any]:
        if self.result is None:
            return []
        return self.result.errors()


class SchemaLoadError(ValidateArgumentsError):
    """A schema file could not be read or parsed."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
