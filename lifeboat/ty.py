"""
The namespace of all supported type validators.

Usage:
    from lifeboat import ty

    user_schema = ty.object({
        "name": ty.string(),
        "age": ty.number(),
        "friends": ty.array(ty.string()),
        "nickname": ty.optional(ty.string()),
    })
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from .core import Validator
from .kinds import Kind
from .missing import Missing
from .validators import (
    ArrayValidator,
    ExactValidator,
    InstanceOfValidator,
    IntersectionValidator,
    LiteralValidator,
    NullableValidator,
    ObjectValidator,
    OptionalValidator,
    SimpleValidator,
    UnionValidator,
    UnknownValidator,
    to_validator,
)

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")


def undefined() -> Validator[Missing]:
    """Accepts only MISSING."""
    return SimpleValidator(Kind.UNDEFINED)


def boolean() -> Validator[bool]:
    """Accepts only booleans."""
    return SimpleValidator(Kind.BOOLEAN)


def number() -> Validator[float]:
    """Accepts floats and ints that fit exactly in a double (±2**53 - 1)."""
    return SimpleValidator(Kind.NUMBER)


def bigint() -> Validator[int]:
    """Accepts only ints too large to be numbers."""
    return SimpleValidator(Kind.BIGINT)


def string() -> Validator[str]:
    """Accepts only strings."""
    return SimpleValidator(Kind.STRING)


def symbol() -> Validator[Enum]:
    """Accepts only enum members."""
    return SimpleValidator(Kind.SYMBOL)


def unknown() -> Validator[Any]:
    """Accepts anything."""
    return UnknownValidator()


def object(schema: Mapping[str, Any]) -> Validator[dict[str, Any]]:
    """
    Validator for objects with a specific shape.

    Validators created this way never accept None; wrap them in
    ``ty.nullable`` to allow it. Properties not listed are ignored, and every
    listed key must be present; ``ty.optional`` lets its value be MISSING.

    Args:
        schema: Property name -> validator (anything ``to_validator`` accepts)

    Usage:
        ty.object({
            "name": ty.string(),
            "age": ty.number(),
            "friend_list": ty.array(ty.string()),
        })
    """
    return ObjectValidator({key: to_validator(v) for key, v in schema.items()})


def array(items: Validator[T] | Any) -> Validator[list[T]]:
    """
    Validator for lists whose items all pass ``items``.

    Usage:
        ty.array(ty.number())
    """
    return ArrayValidator(to_validator(items))


def optional(validator: Validator[T] | Any) -> Validator[T | Missing]:
    """Allow MISSING in addition to the inner type."""
    return OptionalValidator(to_validator(validator))


def nullable(validator: Validator[T] | Any) -> Validator[T | None]:
    """Allow None in addition to the inner type."""
    return NullableValidator(to_validator(validator))


def allow_nullish(validator: Validator[T] | Any) -> Validator[T | None | Missing]:
    """Allow None and MISSING in addition to the inner type."""
    return optional(nullable(validator))


def union(first: Validator[A] | Any, second: Validator[B] | Any) -> Validator[A | B]:
    """
    Accept either type.

    **IMPORTANT**: for unions of plain strings prefer ``ty.string_union``,
    which produces clearer error messages.

    Usage:
        ty.union(ty.string(), ty.number())
    """
    return UnionValidator(to_validator(first), to_validator(second))


def intersection(first: Validator[A] | Any, second: Validator[B] | Any) -> Validator[Any]:
    """
    Accept only what both validators accept.

    Usage:
        ty.intersection(ty.object({"a": ty.number()}), ty.object({"b": ty.number()}))
    """
    return IntersectionValidator(to_validator(first), to_validator(second))


def equals(value: T) -> Validator[T]:
    """
    Accept only ``value`` itself.

    Primitives compare by value within their kind (``True`` does not equal
    ``1``); everything else compares by identity.
    """
    return ExactValidator(value)


def literal(*values: Any) -> Validator[Any]:
    """Accept any one of ``values``, compared like ``ty.equals``."""
    return LiteralValidator(values)


def string_union(*values: str) -> Validator[str]:
    """
    Accept any one of the given strings.

    Usage:
        ty.string_union("abc", "cde", "def")
    """
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"string_union() takes only strings, got {type(value).__name__}")
    return LiteralValidator(values)


def instance_of(cls: type[T]) -> Validator[T]:
    """
    Accept instances of ``cls``.

    Usage:
        ty.instance_of(bytes)
    """
    return InstanceOfValidator(cls)
