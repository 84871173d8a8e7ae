"""
Type definitions for lifeboat validation.

Provides the Ok/Err result pair and the path-aware ValidationError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Path = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """
    Why a value was not accepted by a validator.

    **NOTE**: this is a value, not an exception. It is returned inside ``Err``
    and never raised.

    ``path`` holds pre-formatted segments such as ``".name"`` or ``"[3]"``,
    outermost first.
    """

    problem: str
    path: Path = ()

    @property
    def message(self) -> str:
        """Human-readable message, qualified with the path when there is one."""
        if not self.path:
            return self.problem
        return f"{self.problem} (${''.join(self.path)})"

    def wrap_path(self, *outer: str) -> ValidationError:
        """Return a copy with ``outer`` segments prepended to the path."""
        return ValidationError(self.problem, (*outer, *self.path))

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class Ok:
    """Successful validation."""

    @property
    def valid(self) -> bool:
        return True

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err:
    """Failed validation, carrying the reason."""

    error: ValidationError

    @property
    def valid(self) -> bool:
        return False

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


ValidationResult = Union[Ok, Err]

_OK = Ok()


def ok() -> Ok:
    return _OK


def invalid(problem: str | ValidationError, path: Path = ()) -> Err:
    """
    Build a failed result.

    Usage:
        invalid("Expected an array, found null")
        invalid(child_error.wrap_path("[2]"))
    """
    if isinstance(problem, ValidationError):
        return Err(problem.wrap_path(*path) if path else problem)
    return Err(ValidationError(problem, tuple(path)))
