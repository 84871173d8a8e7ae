"""
Context manager for validation configuration (e.g., the assertion prefix).
"""

from contextlib import contextmanager
from contextvars import ContextVar

DEFAULT_ASSERTION_CONTEXT = "Type assertion failed"

# Context variable for the prefix of assertion failure messages
_assertion_context: ContextVar[str] = ContextVar(
    "assertion_context", default=DEFAULT_ASSERTION_CONTEXT
)


def get_assertion_context() -> str:
    """Return the prefix used when an assertion is made without explicit context."""
    return _assertion_context.get()


@contextmanager
def validation_context(*, assertion_context: str = DEFAULT_ASSERTION_CONTEXT):
    """
    Context manager for validation configuration.

    Args:
        assertion_context: Prefix for ``ValidationAssertionError`` messages raised
            by ``assert_type`` / ``Validator.assert_`` when the caller passes no
            context of its own.

    Example:
        from lifeboat import assert_type, ty, validation_context

        with validation_context(assertion_context="Bad webhook payload"):
            assert_type(ty.string(), 20)
            # ValidationAssertionError: Bad webhook payload: Expected type string, found type number
    """
    token = _assertion_context.set(assertion_context)
    try:
        yield
    finally:
        _assertion_context.reset(token)
