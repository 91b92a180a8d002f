"""Tests for contract metadata validation.

Verifies per-field messages, the fixed message order and the enum presence
rules of `validate_contract_metadata`.
"""

import pytest
from contract_governance.core.enums import CurrencyCode, RecordType, RiskRating
from contract_governance.validation.checks.contract_metadata import (
    ContractMetadataCheck,
    validate_contract_metadata,
)

ALL_MESSAGES = [
    "contractId is required",
    "vendor is required",
    "title is required",
    "startDate must be YYYY-MM-DD",
    "endDate must be YYYY-MM-DD",
    "totalValue must be > 0",
    "currency is required",
    "riskRating is required",
]


def test_valid_contract_passes(valid_contract):
    result = validate_contract_metadata(valid_contract)
    assert result.ok is True
    assert result.errors == []


def test_empty_record_reports_all_fields_in_order():
    result = validate_contract_metadata({})
    assert result.ok is False
    assert result.errors == ALL_MESSAGES


@pytest.mark.parametrize(
    "field_name, message",
    [
        ("contractId", "contractId is required"),
        ("vendor", "vendor is required"),
        ("title", "title is required"),
        ("startDate", "startDate must be YYYY-MM-DD"),
        ("endDate", "endDate must be YYYY-MM-DD"),
        ("totalValue", "totalValue must be > 0"),
        ("currency", "currency is required"),
        ("riskRating", "riskRating is required"),
    ],
)
def test_missing_field_reports_exact_message(valid_contract, field_name, message):
    del valid_contract[field_name]
    result = validate_contract_metadata(valid_contract)
    assert result.ok is False
    assert result.errors == [message]


@pytest.mark.parametrize("value", ["", "   ", None, 17])
def test_blank_or_non_text_identifier_is_missing(valid_contract, value):
    valid_contract["vendor"] = value
    assert validate_contract_metadata(valid_contract).errors == ["vendor is required"]


@pytest.mark.parametrize("value", ["01/01/2024", "2024-1-1", "", None])
def test_malformed_start_date(valid_contract, value):
    valid_contract["startDate"] = value
    assert validate_contract_metadata(valid_contract).errors == ["startDate must be YYYY-MM-DD"]


def test_start_date_shape_only(valid_contract):
    valid_contract["startDate"] = "2024-13-40"
    assert validate_contract_metadata(valid_contract).ok is True


@pytest.mark.parametrize("value", [0, -1, -0.01, "1000", True, float("nan")])
def test_total_value_must_be_positive_number(valid_contract, value):
    valid_contract["totalValue"] = value
    assert validate_contract_metadata(valid_contract).errors == ["totalValue must be > 0"]


def test_fractional_total_value_passes(valid_contract):
    valid_contract["totalValue"] = 0.5
    assert validate_contract_metadata(valid_contract).ok is True


@pytest.mark.parametrize("value", ["", "JPY", "usd", None])
def test_unknown_currency_treated_as_missing(valid_contract, value):
    valid_contract["currency"] = value
    assert validate_contract_metadata(valid_contract).errors == ["currency is required"]


def test_enum_members_accepted(valid_contract):
    valid_contract["currency"] = CurrencyCode.EUR
    valid_contract["riskRating"] = RiskRating.HIGH
    assert validate_contract_metadata(valid_contract).ok is True


def test_unknown_risk_rating_treated_as_missing(valid_contract):
    valid_contract["riskRating"] = "extreme"
    assert validate_contract_metadata(valid_contract).errors == ["riskRating is required"]


@pytest.mark.parametrize("value", [None, "not a record", 42, ["contractId"]])
def test_non_mapping_input_never_raises(value):
    assert validate_contract_metadata(value).errors == ALL_MESSAGES


def test_validation_is_idempotent(valid_contract):
    valid_contract["title"] = " "
    first = validate_contract_metadata(valid_contract)
    second = validate_contract_metadata(valid_contract)
    assert first == second
    assert first.errors == ["title is required"]


def test_check_validates_each_record(valid_contract):
    check = ContractMetadataCheck()
    results = check.validate([valid_contract, {}])
    assert [r.ok for r in results] == [True, False]
    assert len(results[1].errors) == 8


def test_check_applies_only_to_contract_metadata():
    check = ContractMetadataCheck()
    for record_type in RecordType:
        assert check.applies_to_record_type(record_type) is (
            record_type == RecordType.CONTRACT_METADATA
        )
