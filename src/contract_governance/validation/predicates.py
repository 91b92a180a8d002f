"""Primitive predicates shared by all validators.

Each predicate answers a single yes/no question about one value and never
raises, whatever the value's type.
"""

from __future__ import annotations

import numbers
from enum import Enum
from typing import Any, Type

from .config import ISO_DATE_PATTERN


def is_non_empty(value: Any) -> bool:
    """True if value is a string with non-whitespace content.

    Examples:
        >>> is_non_empty("  ACME ")
        True
        >>> is_non_empty("   ")
        False
        >>> is_non_empty(42)
        False
    """
    return isinstance(value, str) and len(value.strip()) > 0


def is_iso_date(value: Any) -> bool:
    """True if value is shaped like YYYY-MM-DD.

    Only the shape is checked, so ``"2024-13-40"`` passes.
    """
    return isinstance(value, str) and ISO_DATE_PATTERN.fullmatch(value) is not None


def is_number(value: Any) -> bool:
    """True for real numbers; booleans and numeric strings are not numbers."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_member(value: Any, enum_cls: Type[Enum]) -> bool:
    """Presence check for enum-valued fields.

    Absent, empty and unrecognised values are all reported as missing, so a
    value counts as present only when it names a member of ``enum_cls``.

    Examples:
        >>> from contract_governance.core.enums import CurrencyCode
        >>> is_member("EUR", CurrencyCode), is_member(CurrencyCode.EUR, CurrencyCode)
        (True, True)
        >>> is_member("XYZ", CurrencyCode), is_member("", CurrencyCode)
        (False, False)
    """
    if isinstance(value, enum_cls):
        return True
    if not isinstance(value, str) or not value:
        return False
    return value in {member.value for member in enum_cls}


__all__ = ["is_non_empty", "is_iso_date", "is_number", "is_member"]
