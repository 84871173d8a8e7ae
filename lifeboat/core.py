"""
Core validator capability for lifeboat validation.

Every validator implements ``validate``; ``check``, ``assert_`` and the
``&`` / ``|`` operators are derived from it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar, final

from .context import get_assertion_context
from .types import ValidationError, ValidationResult

T = TypeVar("T")


class ValidationAssertionError(AssertionError):
    """
    The error raised when an assertion on a validator fails.

    Attributes:
        error: The ValidationError describing the rejection
        context: The prefix the message was built with
    """

    def __init__(self, error: ValidationError, context: str):
        super().__init__(f"{context}: {error.message}")
        self.error = error
        self.context = context


class Validator(ABC, Generic[T]):
    """
    A validator that accepts values of type T.

    Validators are immutable and keep no state between calls, so one instance
    can be shared freely and used from several threads at once.
    """

    __slots__ = ()

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """Validate a value, returning Ok() or Err(ValidationError)."""

    @property
    def type_hint(self) -> Any:
        """The Python type this validator accepts."""
        return Any

    def __call__(self, value: Any) -> ValidationResult:
        return self.validate(value)

    @final
    def check(self, value: Any) -> bool:
        """Return True when the value is accepted. Never raises."""
        return self.validate(value).is_ok()

    @final
    def assert_(self, value: Any, context: str | None = None) -> None:
        """
        Raise ValidationAssertionError when the value is not accepted.

        Args:
            value: The value to check
            context: Message prefix; defaults to the one set by ``validation_context``
        """
        result = self.validate(value)
        if result.is_err():
            raise ValidationAssertionError(
                result.error,
                context if context is not None else get_assertion_context(),
            )

    def __and__(self, other: Any) -> Validator[Any]:
        """
        Intersection: both must pass.

        Usage:
            ty.object({"a": ty.number()}) & ty.object({"b": ty.number()})
        """
        from .validators import IntersectionValidator, to_validator

        return IntersectionValidator(self, to_validator(other))

    def __rand__(self, other: Any) -> Validator[Any]:
        from .validators import IntersectionValidator, to_validator

        return IntersectionValidator(to_validator(other), self)

    def __or__(self, other: Any) -> Validator[Any]:
        """
        Union: at least one must pass, tried left to right.

        Usage:
            ty.string() | ty.number()
            ty.string() | None
        """
        from .validators import UnionValidator, to_validator

        return UnionValidator(self, to_validator(other))

    def __ror__(self, other: Any) -> Validator[Any]:
        from .validators import UnionValidator, to_validator

        return UnionValidator(to_validator(other), self)
