"""
Lifeboat - composable runtime validators for dynamic values.

Usage:
    from lifeboat import assert_type, check_type, ty

    schema = ty.object({
        "name": ty.string(),
        "tags": ty.array(ty.string()),
        "email": ty.optional(ty.string()),
    })

    result = schema.validate(payload)
    if result.is_err():
        print(result.error.message)  # e.g. Expected type string, found type number ($.tags[1])
"""

from . import ty
from .context import get_assertion_context, validation_context
from .core import ValidationAssertionError, Validator
from .kinds import Kind, describe, kind_of, render_literal
from .missing import MISSING, Missing
from .schema import assert_type, check_type, to_pydantic
from .types import Err, Ok, ValidationError, ValidationResult, invalid, ok
from .validators import to_validator

__all__ = [
    # Result types
    "Ok",
    "Err",
    "ValidationError",
    "ValidationResult",
    "ok",
    "invalid",
    # Core
    "Validator",
    "ValidationAssertionError",
    "to_validator",
    "ty",
    # Values
    "MISSING",
    "Missing",
    "Kind",
    "kind_of",
    "describe",
    "render_literal",
    # Schema
    "check_type",
    "assert_type",
    "to_pydantic",
    # Configuration
    "validation_context",
    "get_assertion_context",
]
