"""Schedule validation check.

Validates a contract schedule as a whole. Each entry is checked on its own and
messages carry the zero-based entry index, so one bad entry never hides
problems in the others.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from contract_governance.core.enums import RecordType
from ..config import INVALID_AT_INDEX_MESSAGE, MISSING_AT_INDEX_MESSAGE
from ..models import ValidationResult
from ..predicates import is_iso_date, is_non_empty
from ._common import as_entries


def validate_schedule(entries: Any) -> ValidationResult:
    """Validate a sequence of schedule entries.

    Args:
        entries: Sequence of partial ScheduleEntry mappings.

    Returns:
        ValidationResult with up to four messages per entry.

    Examples:
        >>> validate_schedule([{"taskId": "T-1"}]).errors
        ['milestone missing at index 0', 'dueDate invalid at index 0', 'owner missing at index 0']
    """
    errors: List[str] = []

    for index, entry in enumerate(as_entries(entries)):
        if not is_non_empty(entry.get("taskId")):
            errors.append(MISSING_AT_INDEX_MESSAGE.format(field="taskId", index=index))
        if not is_non_empty(entry.get("milestone")):
            errors.append(MISSING_AT_INDEX_MESSAGE.format(field="milestone", index=index))
        due_date = entry.get("dueDate")
        if not is_non_empty(due_date) or not is_iso_date(due_date):
            errors.append(INVALID_AT_INDEX_MESSAGE.format(field="dueDate", index=index))
        if not is_non_empty(entry.get("owner")):
            errors.append(MISSING_AT_INDEX_MESSAGE.format(field="owner", index=index))

    return ValidationResult.from_errors(errors)


class ScheduleCheck:
    """Validate a batch of schedule entries as one schedule."""

    def validate(self, records: Sequence[Any]) -> List[ValidationResult]:
        return [validate_schedule(records)]

    def applies_to_record_type(self, record_type: RecordType) -> bool:
        return record_type == RecordType.SCHEDULE
