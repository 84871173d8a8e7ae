"""
Runtime kinds of dynamic values, and how to talk about them in messages.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from enum import Enum
from itertools import islice
from typing import Any

from .missing import MISSING

# Largest integer an IEEE double holds exactly; ints past it are "bigint".
MAX_SAFE_INTEGER = 2**53 - 1

# Containers in messages are cut off after this many items, or below this depth
MAX_RENDERED_ITEMS = 20
MAX_RENDERED_DEPTH = 8


class Kind(str, Enum):
    """The fixed set of runtime kind tags."""

    UNDEFINED = "undefined"
    BOOLEAN = "boolean"
    NUMBER = "number"
    BIGINT = "bigint"
    STRING = "string"
    SYMBOL = "symbol"
    OBJECT = "object"

    def __str__(self) -> str:
        return self.value


def kind_of(value: Any) -> Kind:
    """
    Return the runtime kind tag of a value.

    Note:
        ``None``, sequences, mappings and class instances are all ``Kind.OBJECT``.
        Validators that need to tell them apart do their own checks.
    """
    if value is MISSING:
        return Kind.UNDEFINED
    # IntEnum and (str, Enum) members are symbols, not numbers or strings
    if isinstance(value, Enum):
        return Kind.SYMBOL
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, int):
        if -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER:
            return Kind.NUMBER
        return Kind.BIGINT
    if isinstance(value, float):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    return Kind.OBJECT


def describe(value: Any) -> str:
    """Short description of what was found, e.g. ``"null"`` or ``"type string"``."""
    if value is None:
        return "null"
    return f"type {kind_of(value)}"


def strict_equals(a: Any, b: Any) -> bool:
    """
    Strict equality: identity for object-kind values, same kind and ``==`` otherwise.
    """
    kind = kind_of(a)
    if kind is Kind.OBJECT:
        return a is b
    if kind is not kind_of(b):
        return False
    return bool(a == b)


def render_literal(value: Any) -> str:
    """
    Render a value as a literal for error messages.

    Never raises: values without a literal form fall back to a description
    qualified by their kind or class. Containers show at most
    ``MAX_RENDERED_ITEMS`` items and ``MAX_RENDERED_DEPTH`` levels, and a
    container nested inside itself renders as ``[Circular]``.
    """
    return _render(value, frozenset())


def _render(value: Any, seen: frozenset[int]) -> str:
    kind = kind_of(value)
    if kind is Kind.UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if kind is Kind.BOOLEAN:
        return "true" if value else "false"
    if kind is Kind.NUMBER:
        return _render_number(value)
    if kind is Kind.BIGINT:
        return f"{value}n"
    if kind is Kind.STRING:
        return json.dumps(value)
    if kind is Kind.SYMBOL:
        return f"symbol {type(value).__name__}.{value.name}"
    is_sequence = isinstance(value, (list, tuple))
    is_record = isinstance(value, Mapping) and all(isinstance(k, str) for k in value)
    if not (is_sequence or is_record):
        return f"instance of {type(value).__name__}"
    if id(value) in seen:
        return "[Circular]"
    if len(seen) >= MAX_RENDERED_DEPTH:
        return "[...]" if is_sequence else "{...}"

    inner = seen | {id(value)}
    if is_sequence:
        parts = [_render(item, inner) for item in islice(value, MAX_RENDERED_ITEMS)]
    else:
        parts = [
            f"{json.dumps(k)}: {_render(v, inner)}"
            for k, v in islice(value.items(), MAX_RENDERED_ITEMS)
        ]
    if len(value) > MAX_RENDERED_ITEMS:
        parts.append("...")

    body = ", ".join(parts)
    return f"[{body}]" if is_sequence else f"{{{body}}}"


def _render_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)
