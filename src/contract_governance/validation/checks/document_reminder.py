"""Document reminder validation check.

Reminders are delivered by the host to a document owner over a channel, so
the document, owner, due date and channel must all be usable.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from contract_governance.core.enums import RecordType, ReminderChannel
from ..config import DATE_FORMAT_MESSAGE, REQUIRED_MESSAGE, TEXT_MESSAGE
from ..models import ValidationResult
from ..predicates import is_iso_date, is_member, is_non_empty
from ._common import as_record


def validate_document_reminder(record: Any) -> ValidationResult:
    """Validate a document reminder record.

    ``notes`` is optional; when given it must be text.
    """
    record = as_record(record)
    errors: List[str] = []

    if not is_non_empty(record.get("documentName")):
        errors.append(REQUIRED_MESSAGE.format(field="documentName"))
    if not is_non_empty(record.get("owner")):
        errors.append(REQUIRED_MESSAGE.format(field="owner"))
    due_date = record.get("dueDate")
    if not is_non_empty(due_date) or not is_iso_date(due_date):
        errors.append(DATE_FORMAT_MESSAGE.format(field="dueDate"))
    if not is_member(record.get("channel"), ReminderChannel):
        errors.append(REQUIRED_MESSAGE.format(field="channel"))

    notes = record.get("notes")
    if notes is not None and not isinstance(notes, str):
        errors.append(TEXT_MESSAGE.format(field="notes"))

    return ValidationResult.from_errors(errors)


class DocumentReminderCheck:
    """Validate document reminders one by one."""

    def validate(self, records: Sequence[Any]) -> List[ValidationResult]:
        return [validate_document_reminder(r) for r in records]

    def applies_to_record_type(self, record_type: RecordType) -> bool:
        return record_type == RecordType.DOCUMENT_REMINDER
