"""Tests for the validation configuration constants and severity rules."""

from contract_governance.validation.config import (
    BUDGET_OVERRUN_MESSAGE,
    ISO_DATE_PATTERN,
    REQUIRED_MESSAGE,
    WARNING_MESSAGES,
    get_severity,
)


def test_get_severity_defaults_to_error():
    assert get_severity(REQUIRED_MESSAGE.format(field="period")) == "error"
    assert get_severity("dueDate invalid at index 3") == "error"


def test_budget_overrun_is_a_warning():
    assert BUDGET_OVERRUN_MESSAGE in WARNING_MESSAGES
    assert get_severity(BUDGET_OVERRUN_MESSAGE) == "warning"


def test_iso_date_pattern_requires_full_match():
    assert ISO_DATE_PATTERN.fullmatch("2024-07-01")
    assert ISO_DATE_PATTERN.fullmatch("2024-07-012") is None
