"""Helpers shared by the record checks."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, List


def as_record(value: Any) -> Mapping:
    """Return value if it is a mapping, else an empty record.

    Validators must not raise on garbage input; a non-mapping simply has
    every field missing.
    """
    return value if isinstance(value, Mapping) else {}


def as_entries(value: Any) -> List[Mapping]:
    """Return the entries of a sequence input as records.

    A lone mapping or a non-iterable value is treated as an empty sequence.
    """
    if isinstance(value, (Mapping, str, bytes)) or not isinstance(value, Iterable):
        return []
    return [as_record(entry) for entry in value]
