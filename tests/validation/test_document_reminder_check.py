"""Tests for document reminder validation."""

import pytest
from contract_governance.core.enums import RecordType, ReminderChannel
from contract_governance.validation.checks.document_reminder import (
    DocumentReminderCheck,
    validate_document_reminder,
)


def test_valid_reminder_passes(valid_reminder):
    assert validate_document_reminder(valid_reminder).ok is True


def test_notes_are_optional(valid_reminder):
    del valid_reminder["notes"]
    assert validate_document_reminder(valid_reminder).ok is True
    valid_reminder["notes"] = None
    assert validate_document_reminder(valid_reminder).ok is True


def test_empty_record_reports_required_fields_in_order():
    assert validate_document_reminder({}).errors == [
        "documentName is required",
        "owner is required",
        "dueDate must be YYYY-MM-DD",
        "channel is required",
    ]


@pytest.mark.parametrize("channel", ["sms", "", "EMAIL"])
def test_unknown_channel_treated_as_missing(valid_reminder, channel):
    valid_reminder["channel"] = channel
    assert validate_document_reminder(valid_reminder).errors == ["channel is required"]


def test_channel_enum_member_accepted(valid_reminder):
    valid_reminder["channel"] = ReminderChannel.SLACK
    assert validate_document_reminder(valid_reminder).ok is True


def test_non_text_notes_rejected(valid_reminder):
    valid_reminder["notes"] = ["call vendor"]
    assert validate_document_reminder(valid_reminder).errors == ["notes must be text"]


def test_check_applies_only_to_document_reminder(valid_reminder):
    check = DocumentReminderCheck()
    assert [r.ok for r in check.validate([valid_reminder, {}])] == [True, False]
    assert check.applies_to_record_type(RecordType.DOCUMENT_REMINDER) is True
    assert check.applies_to_record_type(RecordType.SCHEDULE) is False


def test_validation_is_idempotent(valid_reminder):
    valid_reminder["dueDate"] = "30/06/2024"
    snapshot = dict(valid_reminder)
    first = validate_document_reminder(valid_reminder)
    second = validate_document_reminder(valid_reminder)
    assert first == second
    assert first.errors == ["dueDate must be YYYY-MM-DD"]
    assert valid_reminder == snapshot
