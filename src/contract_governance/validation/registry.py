"""Validation check registry and runner.

This module orchestrates validation checks:
- ALL_CHECKS: List of all available validation check instances
- run_validation(): Executes applicable checks on in-memory records
- validate_file(): Loads a record file and validates it
- print_report(): Displays validation results to console
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence

from contract_governance.core.enums import RecordType
from contract_governance.ingestion.records import load_records
from .checks.budget import BudgetCheck
from .checks.compliance import ComplianceCheck
from .checks.contract_metadata import ContractMetadataCheck
from .checks.document_reminder import DocumentReminderCheck
from .checks.schedule import ScheduleCheck
from .checks.variation import VariationCheck
from .models import ValidationReport, ValidationResult

logger = logging.getLogger(__name__)

# Registry of all available validation checks
# Order follows the contract lifecycle for documentation clarity
ALL_CHECKS = [
    ContractMetadataCheck(),
    ScheduleCheck(),
    DocumentReminderCheck(),
    BudgetCheck(),
    VariationCheck(),
    ComplianceCheck(),
]


def run_validation(
    record_type: RecordType,
    records: Sequence[Any],
    source_path: Optional[Path] = None,
) -> ValidationReport:
    """Run all applicable validation checks on a batch of records.

    Args:
        record_type: Type of the records (e.g., BUDGET, SCHEDULE).
        records: Partial records of that type.
        source_path: File the records came from, used for report labels only.

    Returns:
        ValidationReport containing aggregated results from all applicable checks.

    Raises:
        ValueError: If no registered check handles ``record_type``.

    Examples:
        >>> report = run_validation(RecordType.BUDGET, [{"period": "Q1"}])
        >>> report.get_error_count()
        5
    """
    records = list(records)
    all_results: List[ValidationResult] = []
    applicable = [check for check in ALL_CHECKS if check.applies_to_record_type(record_type)]
    if not applicable:
        raise ValueError(f"No validation check registered for record type: {record_type}")

    for check in applicable:
        all_results.extend(check.validate(records))

    report = ValidationReport(
        results=all_results,
        record_type=record_type,
        source_path=source_path,
        record_count=len(records),
    )
    logger.debug(
        "Validated %d %s records: %d errors, %d warnings",
        report.record_count,
        record_type.value,
        report.get_error_count(),
        report.get_warning_count(),
    )
    return report


def validate_file(record_type: RecordType, path: Path) -> ValidationReport:
    """Load a record file and validate its records.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file format is unsupported or cannot be parsed.
    """
    records = load_records(path, record_type)
    return run_validation(record_type, records, source_path=path)


def print_report(report: ValidationReport) -> None:
    """Print validation report to console.

    Displays a summary followed by every message of each failed result.

    Args:
        report: ValidationReport to display.

    Examples:
        >>> print_report(run_validation(RecordType.BUDGET, [{}]))
        Validation Summary:
          Record type: BUDGET (<in-memory>)
          Results: 1 validated (0 passed, 1 failed)
          Issues: 6 errors, 0 warnings
        <BLANKLINE>
        Failed Records:
        ❌ record 0: 6 issues
           - contractId is required
           ...
    """
    print(report.summary())
    print()

    failed = [(i, r) for i, r in enumerate(report.results) if not r.ok]

    if not failed:
        print("✅ All validation checks passed!")
        return

    print("Failed Records:")
    for position, result in failed:
        print(f"❌ {report.label(position)}: {len(result.errors)} issues")
        for msg in result.errors:
            print(f"   - {msg}")
