"""Validation checks base interface.

This module defines the protocol (interface) that all validation checks must implement.
Each check validates one record shape (e.g., budget snapshots, schedule entries).

Every check module exposes two things:

1. A plain validator function (e.g. ``validate_budget``) that takes a partial
   record, or a sequence of them, and returns a ``ValidationResult``. These are
   the functions host workflows call directly. They never raise.
2. A check class implementing the ``ValidationCheck`` protocol, used by the
   registry to validate a batch of loaded records.

To add a record shape:

1. Create a new file in this directory (e.g., `my_record.py`)
2. Write the validator function and a check class wrapping it
3. Add the check to the ALL_CHECKS list in registry.py

Example:
    ```python
    # checks/my_record.py
    from typing import Any, List, Sequence
    from contract_governance.core.enums import RecordType
    from ..models import ValidationResult
    from ._common import as_record

    def validate_my_record(record: Any) -> ValidationResult:
        record = as_record(record)
        errors: List[str] = []
        # Checks here, in field declaration order
        return ValidationResult.from_errors(errors)

    class MyRecordCheck:
        def validate(self, records: Sequence[Any]) -> List[ValidationResult]:
            return [validate_my_record(r) for r in records]

        def applies_to_record_type(self, record_type: RecordType) -> bool:
            return record_type == RecordType.MY_RECORD
    ```
"""

from __future__ import annotations

from typing import Any, List, Protocol, Sequence

from contract_governance.core.enums import RecordType
from ..models import ValidationResult


class ValidationCheck(Protocol):
    """Protocol defining the interface for validation checks.

    Use duck typing (Protocol) for flexibility - no need to inherit from a base class.

    Methods:
        validate: Validate a batch of records and return results.
        applies_to_record_type: Determine if check handles a record type.
    """

    def validate(self, records: Sequence[Any]) -> List[ValidationResult]:
        """Validate a batch of records of this check's type.

        Args:
            records: Partial records as loaded from the host or a file.

        Returns:
            One result per record for single-record shapes, or a single result
            covering the whole batch for sequence shapes (schedule, compliance).

        Examples:
            >>> results = check.validate([{"contractId": "C-1"}])
            >>> [r.ok for r in results]
            [False]
        """
        ...

    def applies_to_record_type(self, record_type: RecordType) -> bool:
        """Check if this validation handles a given record type."""
        ...


__all__ = ["ValidationCheck"]
