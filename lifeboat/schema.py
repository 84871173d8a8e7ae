"""
Schema operations for lifeboat validation.

Provides check_type(), assert_type() and to_pydantic().
"""

from __future__ import annotations

import logging
import warnings
from enum import Enum
from typing import Any, Callable, Optional as TypingOptional, TypeGuard, TypeVar, Union

from pydantic import ConfigDict, create_model

from .core import ValidationAssertionError, Validator
from .missing import MISSING
from .validators import (
    ArrayValidator,
    IntersectionValidator,
    NullableValidator,
    ObjectValidator,
    OptionalValidator,
    UnionValidator,
    to_validator,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def check_type(
    validator: Validator[T],
    value: Any,
    on_error: Callable[[str], None] | None = None,
) -> TypeGuard[T]:
    """
    Return True when ``validator`` accepts ``value``, and False otherwise.

    Args:
        validator: The validator to use
        value: The value to check
        on_error: Deprecated. Called with the failure message on rejection;
            call ``validator.validate`` instead to get the error.

    Returns:
        Whether the value was accepted. Never raises.
    """
    if on_error is None:
        return validator.check(value)

    warnings.warn(
        "check_type(..., on_error) is deprecated; use validator.validate() to get the error",
        DeprecationWarning,
        stacklevel=2,
    )
    result = validator.validate(value)
    if result.is_err():
        logger.debug("check_type rejected value: %s", result.error.message)
        on_error(result.error.message)
        return False
    return True


def assert_type(validator: Validator[Any], value: Any, context: str | None = None) -> None:
    """
    Raise ValidationAssertionError when ``validator`` doesn't accept ``value``.

    Args:
        validator: The validator to use
        value: The value to check
        context: Prefix for the error message; defaults to "Type assertion failed"
            (see ``validation_context``)

    Raises:
        ValidationAssertionError: message is "<context>: <error message>"

    Usage:
        assert_type(ty.string(), 20)
        # ValidationAssertionError: Type assertion failed: Expected type string, found type number
    """
    try:
        validator.assert_(value, context)
    except ValidationAssertionError as e:
        logger.debug("%s", e)
        raise


def to_pydantic(name: str, schema: Validator[Any] | dict[str, Any]) -> type:
    """
    Compile an object validator to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: A ``ty.object`` validator, or a dict ``to_validator`` understands

    Returns:
        A Pydantic BaseModel subclass. Properties that may be MISSING become
        fields defaulting to None; nested objects become nested models.

    Usage:
        User = to_pydantic("User", ty.object({
            "name": ty.string(),
            "email": ty.optional(ty.string()),
        }))
        user = User(name="Alice")
    """
    validator = to_validator(schema)
    if not isinstance(validator, ObjectValidator):
        raise TypeError("Schema must be an object validator")

    fields: dict[str, Any] = {}

    for key, v in validator.schema.items():
        field_type = _pydantic_type(v, f"{name}_{key}")
        if v.check(MISSING):
            fields[key] = (TypingOptional[field_type], None)
        else:
            fields[key] = (field_type, ...)

    return create_model(
        name, __config__=ConfigDict(arbitrary_types_allowed=True), **fields
    )


def _pydantic_type(v: Validator[Any], name: str) -> Any:
    """Extract the Pydantic field type for a validator."""
    match v:
        case ObjectValidator():
            return to_pydantic(name, v)
        case ArrayValidator(items=items):
            return list[_pydantic_type(items, name)]  # type: ignore[misc]
        case OptionalValidator(inner=inner):
            return _pydantic_type(inner, name)
        case NullableValidator(inner=inner):
            return TypingOptional[_pydantic_type(inner, name)]
        case UnionValidator(first=first, second=second):
            return Union[_pydantic_type(first, name), _pydantic_type(second, name)]
        case IntersectionValidator(first=first):
            return _pydantic_type(first, name)

    hint = v.type_hint
    if hint is object or hint is Enum:
        return Any
    return hint
