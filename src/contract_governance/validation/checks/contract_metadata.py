"""Contract metadata validation check.

Every contract must be identifiable (id, vendor, title), dated, valued, and
classified by currency and risk before governance steps can run on it.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from contract_governance.core.enums import CurrencyCode, RecordType, RiskRating
from ..config import DATE_FORMAT_MESSAGE, POSITIVE_MESSAGE, REQUIRED_MESSAGE
from ..models import ValidationResult
from ..predicates import is_iso_date, is_member, is_non_empty, is_number
from ._common import as_record


def validate_contract_metadata(record: Any) -> ValidationResult:
    """Validate a contract metadata record.

    Runs eight independent checks in field order and reports each failure once.

    Args:
        record: Partial ContractMetadata mapping.

    Returns:
        ValidationResult with one message per failed check.

    Examples:
        >>> validate_contract_metadata({}).errors[:2]
        ['contractId is required', 'vendor is required']
    """
    record = as_record(record)
    errors: List[str] = []

    for field_name in ("contractId", "vendor", "title"):
        if not is_non_empty(record.get(field_name)):
            errors.append(REQUIRED_MESSAGE.format(field=field_name))

    for field_name in ("startDate", "endDate"):
        value = record.get(field_name)
        if not is_non_empty(value) or not is_iso_date(value):
            errors.append(DATE_FORMAT_MESSAGE.format(field=field_name))

    total_value = record.get("totalValue")
    if not is_number(total_value) or not total_value > 0:
        errors.append(POSITIVE_MESSAGE.format(field="totalValue"))

    if not is_member(record.get("currency"), CurrencyCode):
        errors.append(REQUIRED_MESSAGE.format(field="currency"))
    if not is_member(record.get("riskRating"), RiskRating):
        errors.append(REQUIRED_MESSAGE.format(field="riskRating"))

    return ValidationResult.from_errors(errors)


class ContractMetadataCheck:
    """Validate contract metadata records one by one."""

    def validate(self, records: Sequence[Any]) -> List[ValidationResult]:
        return [validate_contract_metadata(r) for r in records]

    def applies_to_record_type(self, record_type: RecordType) -> bool:
        return record_type == RecordType.CONTRACT_METADATA
