"""Variation order validation check."""

from __future__ import annotations

from typing import Any, List, Sequence

from contract_governance.core.enums import CurrencyCode, RecordType, VariationStatus
from ..config import NUMERIC_MESSAGE, REQUIRED_MESSAGE
from ..models import ValidationResult
from ..predicates import is_member, is_non_empty, is_number
from ._common import as_record


def validate_variation(order: Any) -> ValidationResult:
    """Validate a variation order request.

    ``estimatedImpact`` may be negative (scope reductions) but must be a number.
    """
    order = as_record(order)
    errors: List[str] = []

    for field_name in ("requestId", "contractId", "description"):
        if not is_non_empty(order.get(field_name)):
            errors.append(REQUIRED_MESSAGE.format(field=field_name))

    if not is_number(order.get("estimatedImpact")):
        errors.append(NUMERIC_MESSAGE.format(field="estimatedImpact"))
    if not is_member(order.get("currency"), CurrencyCode):
        errors.append(REQUIRED_MESSAGE.format(field="currency"))
    if not is_member(order.get("status"), VariationStatus):
        errors.append(REQUIRED_MESSAGE.format(field="status"))

    return ValidationResult.from_errors(errors)


class VariationCheck:
    """Validate variation orders one by one."""

    def validate(self, records: Sequence[Any]) -> List[ValidationResult]:
        return [validate_variation(r) for r in records]

    def applies_to_record_type(self, record_type: RecordType) -> bool:
        return record_type == RecordType.VARIATION
