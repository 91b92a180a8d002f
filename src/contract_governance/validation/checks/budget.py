"""Budget snapshot validation check.

Besides field checks, flags snapshots where spending has run past the
committed amount. The overrun finding is a warning: it may be covered by a
variation order the snapshot knows nothing about.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from contract_governance.core.enums import CurrencyCode, RecordType
from ..config import BUDGET_OVERRUN_MESSAGE, NUMBER_MESSAGE, REQUIRED_MESSAGE
from ..models import ValidationResult
from ..predicates import is_member, is_non_empty, is_number
from ._common import as_record


def validate_budget(snapshot: Any) -> ValidationResult:
    """Validate a budget snapshot.

    The overrun rule runs independently of the numeric checks, so it fires
    whenever both ``spent`` and ``committed`` are numbers and spent > committed.

    Args:
        snapshot: Partial BudgetSnapshot mapping.

    Returns:
        ValidationResult with field errors followed by the overrun warning (if any).

    Examples:
        >>> validate_budget({
        ...     "contractId": "C-1", "period": "Q1", "committed": 100,
        ...     "spent": 120, "forecast": 130, "currency": "USD",
        ... }).errors
        ['spent cannot exceed committed without a variation order']
    """
    snapshot = as_record(snapshot)
    errors: List[str] = []

    for field_name in ("contractId", "period"):
        if not is_non_empty(snapshot.get(field_name)):
            errors.append(REQUIRED_MESSAGE.format(field=field_name))

    for field_name in ("committed", "spent", "forecast"):
        if not is_number(snapshot.get(field_name)):
            errors.append(NUMBER_MESSAGE.format(field=field_name))

    if not is_member(snapshot.get("currency"), CurrencyCode):
        errors.append(REQUIRED_MESSAGE.format(field="currency"))

    committed = snapshot.get("committed")
    spent = snapshot.get("spent")
    if is_number(spent) and is_number(committed) and spent > committed:
        errors.append(BUDGET_OVERRUN_MESSAGE)

    return ValidationResult.from_errors(errors)


class BudgetCheck:
    """Validate budget snapshots one by one."""

    def validate(self, records: Sequence[Any]) -> List[ValidationResult]:
        return [validate_budget(r) for r in records]

    def applies_to_record_type(self, record_type: RecordType) -> bool:
        return record_type == RecordType.BUDGET
