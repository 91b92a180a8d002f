"""Compliance checkpoint validation check.

Validates a set of compliance checkpoints as a whole; messages carry the
zero-based checkpoint index. ``evidenceUrl`` is optional and not checked.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from contract_governance.core.enums import CheckpointSeverity, CheckpointStatus, RecordType
from ..config import MISSING_AT_INDEX_MESSAGE
from ..models import ValidationResult
from ..predicates import is_member, is_non_empty
from ._common import as_entries


def validate_compliance(checkpoints: Any) -> ValidationResult:
    """Validate a sequence of compliance checkpoints.

    Args:
        checkpoints: Sequence of partial ComplianceCheckpoint mappings.

    Returns:
        ValidationResult with up to four messages per checkpoint.
    """
    errors: List[str] = []

    for index, checkpoint in enumerate(as_entries(checkpoints)):
        if not is_non_empty(checkpoint.get("clause")):
            errors.append(MISSING_AT_INDEX_MESSAGE.format(field="clause", index=index))
        if not is_non_empty(checkpoint.get("controlOwner")):
            errors.append(MISSING_AT_INDEX_MESSAGE.format(field="controlOwner", index=index))
        if not is_member(checkpoint.get("severity"), CheckpointSeverity):
            errors.append(MISSING_AT_INDEX_MESSAGE.format(field="severity", index=index))
        if not is_member(checkpoint.get("status"), CheckpointStatus):
            errors.append(MISSING_AT_INDEX_MESSAGE.format(field="status", index=index))

    return ValidationResult.from_errors(errors)


class ComplianceCheck:
    """Validate a batch of checkpoints as one checkpoint set."""

    def validate(self, records: Sequence[Any]) -> List[ValidationResult]:
        return [validate_compliance(records)]

    def applies_to_record_type(self, record_type: RecordType) -> bool:
        return record_type == RecordType.COMPLIANCE
