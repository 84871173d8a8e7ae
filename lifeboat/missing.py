"""
MISSING sentinel for values that are absent rather than null.
"""

from enum import Enum


class Missing(Enum):
    """
    Sentinel marking the absence of a value.

    ``None`` is a real value ("null"); ``MISSING`` stands for "no value at all",
    for example a record field left unset. Validators built with
    ``ty.optional`` accept it, everything else rejects it. An object key whose
    value is MISSING still counts as present.

    Examples:
        ty.optional(ty.number()).check(MISSING)   # True
        ty.nullable(ty.number()).check(MISSING)   # False
    """

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = Missing.MISSING
