"""Decorator that validates a function's arguments on every call."""
from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar

from .schema import normalize_schema
from .validate import validate_named

F = TypeVar("F", bound=Callable[..., Any])


def guard(schema: Any = None, **fields: Any) -> Callable[[F], F]:
    """Validate call arguments against a named schema before running the function.

    Arguments are bound to parameter names (defaults applied) and checked with
    the same rules as :func:`validate_arguments.named`. A failed check raises
    ``ArgumentValidationError`` and the function body does not run.

    The schema may be passed as a mapping or ``Schema``, as keyword arguments,
    or both (keywords win)::

        @guard(name="string", retries={"isa": "natural", "optional": True})
        def connect(name, retries=None): ...
    """
    spec = normalize_schema(schema) if schema is not None else {}
    spec.update(normalize_schema(fields))

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        def check(args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            validate_named(dict(bound.arguments), spec).raise_on_error()

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                check(args, kwargs)
                return await func(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            check(args, kwargs)
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
