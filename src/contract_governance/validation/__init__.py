"""Validation system for contract-governance records.

This module provides the validation framework for governance records:

- **Predicates**: is_non_empty, is_iso_date, ... - primitive field checks
- **Checks**: One validator per record shape (see validation/checks/)
- **Models**: ValidationResult, ValidationReport - validation result data structures
- **Config**: Message texts and severity rules (import from .config)
- **Registry**: run_validation(), validate_file(), print_report() - batch validation

Public API:
    validate_contract_metadata, validate_schedule, validate_document_reminder,
    validate_budget, validate_variation, validate_compliance: record validators
    ValidationResult: Outcome of one validator call
    ValidationReport: Aggregated results with severity-aware helpers
    run_validation: Validate a batch of in-memory records
    validate_file: Validate a YAML/JSON/CSV record file

Usage:
    >>> from contract_governance.validation import validate_budget
    >>> result = validate_budget({"contractId": "C-1", "period": "Q1"})
    >>> result.ok
    False
"""

from __future__ import annotations

from contract_governance.core.enums import RecordType

from .checks.budget import validate_budget
from .checks.compliance import validate_compliance
from .checks.contract_metadata import validate_contract_metadata
from .checks.document_reminder import validate_document_reminder
from .checks.schedule import validate_schedule
from .checks.variation import validate_variation
from .models import ValidationReport, ValidationResult
from .predicates import is_iso_date, is_non_empty
from .registry import print_report, run_validation, validate_file

__all__ = [
    # Validators
    "validate_contract_metadata",
    "validate_schedule",
    "validate_document_reminder",
    "validate_budget",
    "validate_variation",
    "validate_compliance",
    # Predicates
    "is_non_empty",
    "is_iso_date",
    # Data models
    "ValidationResult",
    "ValidationReport",
    # Runner functions
    "run_validation",
    "validate_file",
    "print_report",
    # Enums
    "RecordType",
]
