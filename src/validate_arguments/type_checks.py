"""Type predicates addressable by name.

Schemas refer to types by short names (``"string"``, ``"natural"``, ...).
Each name maps to one ``is_*`` predicate below; :func:`is_of_type` is the
lookup used by the validation engine.
"""
from __future__ import annotations

import datetime as _dt
import math
import numbers
import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping, Sized
from types import MappingProxyType
from typing import Any, Callable


def is_number(value: Any) -> bool:
    """A real number. Booleans and NaN do not count."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_whole(value: Any) -> bool:
    # a whole number (int), 3.0 included
    return is_number(value) and value % 1 == 0


def is_real(value: Any) -> bool:
    # a real number (float)
    return is_number(value)


def is_natural(value: Any) -> bool:
    # a non-negative whole number
    return is_whole(value) and value >= 0


def is_finite(value: Any) -> bool:
    if not is_number(value):
        return False
    # exact rationals are always finite; float() may overflow on them
    if isinstance(value, numbers.Rational):
        return True
    return math.isfinite(value)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    """Anything that is not a scalar: containers, callables, instances."""
    if value is None:
        return False
    return not isinstance(value, (str, bytes, numbers.Number))


def is_plain_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_function(value: Any) -> bool:
    return callable(value)


def is_date(value: Any) -> bool:
    return isinstance(value, _dt.date)


def is_regexp(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_null(value: Any) -> bool:
    return value is None


def is_empty(value: Any) -> bool:
    """``None`` or a sized value of length zero.

    Numbers and booleans are never empty.
    """
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_element(value: Any) -> bool:
    return isinstance(value, ET.Element)


TYPE_PREDICATES: Mapping[str, Callable[[Any], bool]] = MappingProxyType({
    "whole": is_whole,
    "real": is_real,
    "natural": is_natural,
    "string": is_string,
    "number": is_number,
    "boolean": is_boolean,
    "array": is_array,
    "object": is_object,
    "plainObject": is_plain_object,
    "function": is_function,
    "date": is_date,
    "regexp": is_regexp,
    "null": is_null,
    "empty": is_empty,
    "finite": is_finite,
    "element": is_element,
})

TYPE_NAMES: tuple[str, ...] = tuple(TYPE_PREDICATES)


def is_of_type(value: Any, type_name: str) -> bool:
    """Check ``value`` against the predicate registered as ``type_name``.

    Unknown names are never satisfied.
    """
    if not isinstance(type_name, str):
        return False
    predicate = TYPE_PREDICATES.get(type_name)
    if predicate is None:
        return False
    return predicate(value)
