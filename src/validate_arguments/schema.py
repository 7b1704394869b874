"""Schema normalization and the reusable Schema object.

A schema maps field names (or positional indices) to field specs. Authors may
write a field spec in full, ``{"isa": "string", "optional": True}``, or use a
shorthand: a bare type name, a bare nested mapping, or a class. Normalizing
turns every entry into a :class:`FieldSpec` whose ``isa`` is one of the
constraint types below.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Union

from .exceptions import SchemaLoadError

if TYPE_CHECKING:
    from .validate import ValidationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeName:
    """Value must satisfy the registered type predicate ``name``."""

    name: str


@dataclass(frozen=True)
class NestedSchema:
    """Value must be a mapping matching ``fields``.

    ``fields`` is stored as a read-only mapping.
    """

    fields: Mapping[Any, FieldSpec]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        return hash(tuple(self.fields.items()))


@dataclass(frozen=True)
class InstanceOf:
    """Value must be an instance of ``cls``."""

    cls: type


@dataclass(frozen=True)
class Unsatisfiable:
    """An ``isa`` the engine does not understand. Never satisfied."""

    raw: Any

    def __hash__(self) -> int:
        return hash(repr(self.raw))


Constraint = Union[TypeName, NestedSchema, InstanceOf, Unsatisfiable]

_CONSTRAINT_TYPES = (TypeName, NestedSchema, InstanceOf, Unsatisfiable)


@dataclass(frozen=True)
class FieldSpec:
    """Normalized constraint for one field."""

    isa: Constraint
    optional: bool = False


def _to_constraint(isa: Any) -> Constraint:
    if isinstance(isa, _CONSTRAINT_TYPES):
        return isa
    if isinstance(isa, str):
        return TypeName(isa)
    if isinstance(isa, Schema):
        return NestedSchema(dict(isa.fields))
    if isinstance(isa, Mapping):
        return NestedSchema(normalize_schema(isa))
    if isinstance(isa, type):
        return InstanceOf(isa)
    return Unsatisfiable(isa)


def normalize_field(value: Any) -> FieldSpec:
    """Expand one (possibly shorthand) field spec into a :class:`FieldSpec`."""
    if isinstance(value, FieldSpec):
        return value
    if isinstance(value, Mapping) and "isa" in value:
        return FieldSpec(
            isa=_to_constraint(value["isa"]),
            optional=bool(value.get("optional", False)),
        )
    return FieldSpec(isa=_to_constraint(value))


def normalize_schema(schema: Any) -> dict[Any, FieldSpec]:
    """Return a fully explicit copy of ``schema``.

    Mappings keep their keys; sequences are keyed by index. Anything else
    normalizes to an empty schema, which the engine reports as
    "missing validation spec". Normalizing twice gives the same result as
    normalizing once.
    """
    if isinstance(schema, Schema):
        return dict(schema.fields)
    if isinstance(schema, Mapping):
        items = schema.items()
    elif isinstance(schema, (list, tuple)):
        items = enumerate(schema)
    else:
        return {}
    return {key: normalize_field(value) for key, value in items}


def describe_constraint(isa: Constraint) -> str:
    """Stable text form of a constraint, as used in error messages."""
    if isinstance(isa, TypeName):
        return isa.name
    if isinstance(isa, InstanceOf):
        return isa.cls.__name__
    if isinstance(isa, NestedSchema):
        inner = ", ".join(
            f"{key}: {describe_constraint(spec.isa)}" for key, spec in isa.fields.items()
        )
        return "{" + inner + "}"
    return repr(isa.raw)


class Schema:
    """A normalized schema, built once and reused across validations.

    Create directly from a mapping or sequence, or via ``from_dict``,
    ``from_string`` (YAML) and ``from_file`` (``.yaml``, ``.yml``, ``.json``).
    A sequence, or a bare type name, makes a positional schema.
    """

    def __init__(self, raw: Any, *, path: str | None = None):
        self._raw = raw
        self._path = path
        if isinstance(raw, str):
            raw = [raw]
        self._fields = MappingProxyType(normalize_schema(raw))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Schema:
        return cls(dict(data))

    @classmethod
    def from_string(cls, yaml_str: str) -> Schema:
        return cls(_load_yaml(yaml_str))

    @classmethod
    def from_file(cls, path: str | Path) -> Schema:
        p = Path(path)
        logger.debug("Loading schema", extra={"schema_path": str(p)})
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SchemaLoadError(f"Cannot read schema file {p}: {exc}", path=str(p)) from exc

        if p.suffix.lower() == ".json":
            try:
                raw = json.loads(text)
            except json.JSONDecodeError as exc:
                raise SchemaLoadError(f"Invalid JSON in {p}: {exc}", path=str(p)) from exc
        else:
            raw = _load_yaml(text, path=str(p))
        return cls(raw, path=str(p))

    @property
    def raw(self) -> Any:
        return self._raw

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def fields(self) -> Mapping[Any, FieldSpec]:
        return self._fields

    @property
    def is_positional(self) -> bool:
        return isinstance(self._raw, (list, tuple, str))

    def validate(self, values: Any) -> ValidationResult:
        """Validate ``values`` in this schema's mode (positional or named)."""
        from .validate import validate_named, validate_positional

        if self.is_positional:
            return validate_positional(values, self)
        return validate_named(values, self)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        mode = "positional" if self.is_positional else "named"
        return f"<Schema: {len(self._fields)} fields ({mode})>"


def _load_yaml(text: str, path: str | None = None) -> Any:
    try:
        import yaml
    except ImportError:
        raise ImportError(
            "Loading YAML schemas requires PyYAML: pip install validate-arguments[yaml]"
        ) from None

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        where = f" in {path}" if path else ""
        raise SchemaLoadError(f"Invalid YAML{where}: {exc}", path=path) from exc
    if data is None:
        return {}
    return data
