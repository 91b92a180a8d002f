"""Tests for the primitive field predicates."""

import math

import pytest
from contract_governance.core.enums import CurrencyCode, RiskRating
from contract_governance.validation.predicates import (
    is_iso_date,
    is_member,
    is_non_empty,
    is_number,
)


@pytest.mark.parametrize("value", ["a", " ACME ", "0"])
def test_is_non_empty_accepts_text(value):
    assert is_non_empty(value) is True


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n", 0, 12, ["x"], {"a": 1}])
def test_is_non_empty_rejects_missing_blank_and_non_text(value):
    assert is_non_empty(value) is False


@pytest.mark.parametrize("value", ["2024-07-01", "0000-00-00", "2024-13-40"])
def test_is_iso_date_checks_shape_only(value):
    """Calendar validity is not checked."""
    assert is_iso_date(value) is True


@pytest.mark.parametrize(
    "value",
    [
        None,
        "",
        "2024-7-01",
        "2024/07/01",
        "24-07-01",
        "2024-07-01T00:00:00",
        " 2024-07-01",
        "2024-07-01\n",
        "２０２４-０７-０１",  # full-width digits
        20240701,
    ],
)
def test_is_iso_date_rejects_malformed(value):
    assert is_iso_date(value) is False


@pytest.mark.parametrize("value", [0, -3, 1.5, 500000, float("inf"), math.nan])
def test_is_number_accepts_reals(value):
    assert is_number(value) is True


@pytest.mark.parametrize("value", [None, "100", True, False, [1], 1j])
def test_is_number_rejects_non_numbers(value):
    assert is_number(value) is False


def test_is_member_accepts_values_and_members():
    assert is_member("USD", CurrencyCode) is True
    assert is_member(CurrencyCode.NZD, CurrencyCode) is True
    assert is_member("high", RiskRating) is True


@pytest.mark.parametrize("value", [None, "", "usd", "XYZ", 1, RiskRating.LOW])
def test_is_member_treats_unknown_as_missing(value):
    assert is_member(value, CurrencyCode) is False
