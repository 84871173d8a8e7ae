"""
Concrete validators for lifeboat validation.

Leaf validators check a single value; structural validators (object, array)
recurse and add a path segment; modifiers (optional, nullable, union,
intersection) recurse without one.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Literal, Optional, Union

from .core import Validator
from .kinds import Kind, describe, kind_of, render_literal, strict_equals
from .missing import MISSING
from .types import ValidationResult, invalid, ok

_KIND_HINTS: dict[Kind, Any] = {
    Kind.UNDEFINED: Literal[MISSING],
    Kind.BOOLEAN: bool,
    Kind.NUMBER: float,
    Kind.BIGINT: int,
    Kind.STRING: str,
    Kind.SYMBOL: Enum,
    Kind.OBJECT: object,
}

_LITERAL_KINDS = (Kind.UNDEFINED, Kind.BOOLEAN, Kind.NUMBER, Kind.BIGINT, Kind.STRING, Kind.SYMBOL)


def _literal_hint(values: tuple[Any, ...]) -> Any:
    if all(v is None or (kind_of(v) in _LITERAL_KINDS and not isinstance(v, float)) for v in values):
        return Literal[values]
    return Any


# ---------------------------------------------------------------------
# Leaf validators
# ---------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class UnknownValidator(Validator[Any]):
    """Accepts anything. Useful to stop validating at some depth."""

    def validate(self, value: Any) -> ValidationResult:
        return ok()


@dataclass(frozen=True, slots=True)
class SimpleValidator(Validator[Any]):
    """Accepts values whose runtime kind is ``kind``."""

    kind: Kind

    def validate(self, value: Any) -> ValidationResult:
        if kind_of(value) is self.kind:
            return ok()
        return invalid(f"Expected type {self.kind}, found {describe(value)}")

    @property
    def type_hint(self) -> Any:
        return _KIND_HINTS[self.kind]


@dataclass(frozen=True, slots=True)
class ExactValidator(Validator[Any]):
    """Accepts only values strictly equal to ``expected``."""

    expected: Any

    def validate(self, value: Any) -> ValidationResult:
        if strict_equals(value, self.expected):
            return ok()
        return invalid(
            f"Expected {render_literal(self.expected)}, found {render_literal(value)}"
        )

    @property
    def type_hint(self) -> Any:
        return _literal_hint((self.expected,))


@dataclass(frozen=True, slots=True)
class LiteralValidator(Validator[Any]):
    """Accepts values strictly equal to one of ``values``."""

    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError("A literal union needs at least one value")
        for i, value in enumerate(self.values):
            if any(strict_equals(value, other) for other in self.values[:i]):
                raise ValueError(f"Duplicate literal value: {render_literal(value)}")

    def validate(self, value: Any) -> ValidationResult:
        if any(strict_equals(value, allowed) for allowed in self.values):
            return ok()
        expected = ", ".join(render_literal(v) for v in self.values)
        return invalid(f"Expected one of [{expected}], found {render_literal(value)}")

    @property
    def type_hint(self) -> Any:
        return _literal_hint(self.values)


@dataclass(frozen=True, slots=True)
class InstanceOfValidator(Validator[Any]):
    """Accepts instances of ``cls`` (subclasses included)."""

    cls: type

    def __post_init__(self) -> None:
        if not isinstance(self.cls, type):
            raise TypeError(f"instance_of() requires a class, got {type(self.cls).__name__}")

    def validate(self, value: Any) -> ValidationResult:
        if isinstance(value, self.cls):
            return ok()
        expected = f"Expected instance of {self.cls.__name__}"
        # The sentinels have no class worth naming
        if value is None or value is MISSING:
            return invalid(f"{expected}, found {render_literal(value)}")
        return invalid(f"{expected}, found instance of {type(value).__name__}")

    @property
    def type_hint(self) -> Any:
        return self.cls


# ---------------------------------------------------------------------
# Structural validators
# ---------------------------------------------------------------------


def _lookup(value: Any, key: str) -> tuple[bool, Any]:
    """
    Find a property among a mapping's keys or an instance's own data.

    Only instance data counts: properties, methods and class attributes are
    never evaluated, so looking up a key runs no user code.
    """
    if isinstance(value, Mapping):
        if key in value:
            return True, value[key]
        return False, MISSING

    try:
        data = vars(value)
    except TypeError:
        data = {}
    if key in data:
        return True, data[key]
    return _slot_lookup(value, key)


def _slot_lookup(value: Any, key: str) -> tuple[bool, Any]:
    """Read ``key`` from a ``__slots__`` entry declared anywhere in the MRO."""
    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        if key not in slots:
            continue
        descriptor = cls.__dict__.get(key)
        if descriptor is None:
            continue
        try:
            return True, descriptor.__get__(value, type(value))
        except AttributeError:
            # Declared but never assigned
            return False, MISSING
    return False, MISSING


@dataclass(frozen=True, slots=True)
class ObjectValidator(Validator[Any]):
    """
    Validator for objects with a fixed set of properties.

    Every key in ``schema`` must be present, even when its validator is
    ``ty.optional``: an optional property may hold MISSING, but the key itself
    is still required. Keys not in the schema are ignored.
    """

    schema: Mapping[str, Validator[Any]]

    def __post_init__(self) -> None:
        object.__setattr__(self, "schema", MappingProxyType(dict(self.schema)))

    def validate(self, value: Any) -> ValidationResult:
        if kind_of(value) is not Kind.OBJECT or value is None:
            return invalid(f"Expected an object, found {describe(value)}")

        for key, validator in self.schema.items():
            present, field_value = _lookup(value, key)
            if not present:
                return invalid(f'Missing required property "{key}"')
            result = validator.validate(field_value)
            if result.is_err():
                return invalid(result.error.wrap_path(f".{key}"))

        return ok()

    @property
    def type_hint(self) -> Any:
        return dict[str, Any]


@dataclass(frozen=True, slots=True)
class ArrayValidator(Validator[Any]):
    """Validator for lists (and tuples) whose items all pass ``items``."""

    items: Validator[Any]

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, (list, tuple)):
            return invalid(f"Expected an array, found {describe(value)}")

        for i, item in enumerate(value):
            result = self.items.validate(item)
            if result.is_err():
                return invalid(result.error.wrap_path(f"[{i}]"))

        return ok()

    @property
    def type_hint(self) -> Any:
        return list[self.items.type_hint]  # type: ignore[name-defined]


# ---------------------------------------------------------------------
# Modifiers
# ---------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class OptionalValidator(Validator[Any]):
    """Accepts MISSING in addition to whatever ``inner`` accepts."""

    inner: Validator[Any]

    def validate(self, value: Any) -> ValidationResult:
        if value is MISSING:
            return ok()
        return self.inner.validate(value)

    @property
    def type_hint(self) -> Any:
        # MISSING is an absence, not a type; optional properties show up as defaults
        return self.inner.type_hint


@dataclass(frozen=True, slots=True)
class NullableValidator(Validator[Any]):
    """Accepts None in addition to whatever ``inner`` accepts."""

    inner: Validator[Any]

    def validate(self, value: Any) -> ValidationResult:
        if value is None:
            return ok()
        return self.inner.validate(value)

    @property
    def type_hint(self) -> Any:
        return Optional[self.inner.type_hint]


@dataclass(frozen=True, slots=True)
class UnionValidator(Validator[Any]):
    """Accepts anything either validator accepts, trying ``first`` first."""

    first: Validator[Any]
    second: Validator[Any]

    def validate(self, value: Any) -> ValidationResult:
        first = self.first.validate(value)
        if first.is_ok():
            return ok()
        second = self.second.validate(value)
        if second.is_ok():
            return ok()
        return invalid(
            f"No validators were satisfied ({first.error.message}; {second.error.message})"
        )

    @property
    def type_hint(self) -> Any:
        return Union[self.first.type_hint, self.second.type_hint]


@dataclass(frozen=True, slots=True)
class IntersectionValidator(Validator[Any]):
    """
    Accepts only what both validators accept.

    A failure is reported exactly as the first failing validator reported it.
    """

    first: Validator[Any]
    second: Validator[Any]

    def validate(self, value: Any) -> ValidationResult:
        result = self.first.validate(value)
        if result.is_err():
            return result
        return self.second.validate(value)

    @property
    def type_hint(self) -> Any:
        # Python typing has no intersection; the first validator is the primary shape
        return self.first.type_hint


_TYPE_VALIDATORS: dict[type, Validator[Any]] = {
    str: SimpleValidator(Kind.STRING),
    bool: SimpleValidator(Kind.BOOLEAN),
    int: SimpleValidator(Kind.NUMBER),
    float: SimpleValidator(Kind.NUMBER),
}


def to_validator(v: Any) -> Validator[Any]:
    """
    Coerce a value to a validator.

    Conversion rules:
        Validator -> pass through
        str / bool / int / float -> the matching primitive validator
        None -> exact match on None
        other classes -> instance check
        dict -> ObjectValidator with recursive conversion
        [item] -> ArrayValidator for item
    """
    if isinstance(v, Validator):
        return v

    if v is None:
        return ExactValidator(None)

    if isinstance(v, type):
        if v in _TYPE_VALIDATORS:
            return _TYPE_VALIDATORS[v]
        return InstanceOfValidator(v)

    if isinstance(v, dict):
        return ObjectValidator({k: to_validator(val) for k, val in v.items()})

    if isinstance(v, list):
        if len(v) != 1:
            raise ValueError("A list schema must contain exactly one item validator")
        return ArrayValidator(to_validator(v[0]))

    raise TypeError(f"Cannot convert {type(v).__name__} to validator")
