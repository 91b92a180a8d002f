"""Validation data models.

This module defines core data structures for validation results:
- ValidationResult: Outcome of validating one record (or one sequence of records)
- ValidationReport: Aggregated results for a batch of records of one type
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from contract_governance.core.enums import RecordType
from contract_governance.core.schemas import is_sequence_type
from .config import get_severity


@dataclass(frozen=True)
class ValidationResult:
    """Result of a single validator call.

    Attributes:
        ok: True if no check failed.
        errors: Failure messages in check order.

    Examples:
        >>> ValidationResult.from_errors([])
        ValidationResult(ok=True, errors=[])
        >>> ValidationResult.from_errors(["period is required"]).ok
        False
    """

    ok: bool
    errors: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if self.ok and self.errors:
            raise ValueError("ok=True requires an empty errors list")
        if not self.ok and not self.errors:
            raise ValueError("ok=False requires at least one error")

    @classmethod
    def from_errors(cls, errors: Iterable[str]) -> "ValidationResult":
        errors = list(errors)
        return cls(ok=not errors, errors=errors)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form handed back to the host workflow."""
        return {"ok": self.ok, "errors": list(self.errors)}


@dataclass
class ValidationReport:
    """Aggregated validation results for a batch of records.

    Single-record types (contract metadata, budget, ...) carry one result per
    record. Sequence types (schedule, compliance) carry one result for the
    whole sequence, with entry indexes embedded in the messages.

    Attributes:
        results: Validator results, in record order.
        record_type: Type of the validated records.
        source_path: File the records were loaded from (if any).
        record_count: Number of records validated.

    Examples:
        >>> report = ValidationReport(
        ...     results=[ValidationResult.from_errors(["period is required"])],
        ...     record_type=RecordType.BUDGET,
        ...     record_count=1,
        ... )
        >>> report.has_errors()
        True
        >>> report.get_error_count()
        1
    """

    results: List[ValidationResult]
    record_type: RecordType
    source_path: Optional[Path] = None
    record_count: int = 0

    @property
    def source_name(self) -> str:
        return self.source_path.name if self.source_path else "<in-memory>"

    def label(self, position: int) -> str:
        """Human-readable label of the result at ``position``."""
        if is_sequence_type(self.record_type):
            return f"{self.record_count} entries"
        return f"record {position}"

    def get_messages(self, severity: Optional[str] = None) -> List[str]:
        """Get all failure messages, optionally filtered by severity.

        Args:
            severity: Filter by severity level ("error" or "warning"). None returns all.

        Returns:
            Messages in result order.
        """
        return [
            msg
            for r in self.results
            for msg in r.errors
            if severity is None or get_severity(msg) == severity
        ]

    def has_errors(self, strict: bool = False) -> bool:
        """Check if validation failed.

        Args:
            strict: If True, treat warnings as errors. Default False.

        Returns:
            True if any errors found (or warnings in strict mode), False otherwise.
        """
        if self.get_error_count() > 0:
            return True
        return strict and self.get_warning_count() > 0

    def get_error_count(self) -> int:
        return len(self.get_messages("error"))

    def get_warning_count(self) -> int:
        return len(self.get_messages("warning"))

    def get_failed_results(self) -> List[ValidationResult]:
        return [r for r in self.results if not r.ok]

    def summary(self) -> str:
        """Generate a concise text summary of validation results.

        Returns:
            Multi-line summary string showing pass/fail counts.

        Examples:
            >>> print(report.summary())
            Validation Summary:
              Record type: BUDGET (<in-memory>)
              Results: 1 validated (0 passed, 1 failed)
              Issues: 1 errors, 0 warnings
        """
        total = len(self.results)
        failed = len(self.get_failed_results())

        return (
            f"Validation Summary:\n"
            f"  Record type: {self.record_type.value} ({self.source_name})\n"
            f"  Results: {total} validated ({total - failed} passed, {failed} failed)\n"
            f"  Issues: {self.get_error_count()} errors, {self.get_warning_count()} warnings"
        )

    def to_markdown(self) -> str:
        """Generate detailed Markdown validation report.

        Returns:
            Formatted Markdown string with a header, summary counts, and the
            failure messages of every failed result grouped by severity.
        """
        from datetime import datetime

        errors = self.get_error_count()
        warnings = self.get_warning_count()
        failed = [(i, r) for i, r in enumerate(self.results) if not r.ok]

        lines = [
            f"# Validation Report: {self.source_name}",
            "",
            f"**Record Type:** {self.record_type.value}",
            f"**Records:** {self.record_count}",
            f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            "## Summary",
            "",
            f"- **Results:** {len(self.results)}",
            f"- **Passed:** {len(self.results) - len(failed)} ✅",
            f"- **Failed:** {len(failed)} ❌",
            "",
            f"- **Errors:** {errors} ❌" if errors > 0 else f"- **Errors:** {errors}",
            f"- **Warnings:** {warnings} ⚠️" if warnings > 0 else f"- **Warnings:** {warnings}",
            "",
        ]

        if not failed:
            lines.append("## ✅ All Records Passed")
            lines.append("")
            lines.append("No validation issues found.")
            lines.append("")
        else:
            lines.append("## Failed Records")
            lines.append("")
            for position, result in failed:
                lines.append(f"### {self.label(position)} ({len(result.errors)} issues)")
                lines.append("")
                for msg in result.errors:
                    icon = "⚠️" if get_severity(msg) == "warning" else "❌"
                    lines.append(f"- {icon} {msg}")
                lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Generate detailed JSON validation report."""
        import json
        from datetime import datetime

        report_data = {
            "metadata": {
                "record_type": self.record_type.value,
                "source_path": self.source_name,
                "record_count": self.record_count,
                "generated_at": datetime.now().isoformat(),
            },
            "summary": {
                "results": len(self.results),
                "failed": len(self.get_failed_results()),
                "errors": self.get_error_count(),
                "warnings": self.get_warning_count(),
            },
            "results": [
                {
                    "label": self.label(i),
                    **r.to_dict(),
                    "warnings": [m for m in r.errors if get_severity(m) == "warning"],
                }
                for i, r in enumerate(self.results)
            ],
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)

    def to_console_summary(self) -> str:
        """Generate a concise summary for console output.

        Returns:
            The overall summary followed by each failed result's first message.
        """
        lines = [self.summary(), ""]

        failed = [(i, r) for i, r in enumerate(self.results) if not r.ok]

        if not failed:
            lines.append("✅ All validation checks passed!")
        else:
            lines.append("Check Details:")
            for position, result in failed:
                lines.append(f"❌ {self.label(position)}: {len(result.errors)} issues")
                lines.append(f"   - {result.errors[0]}")

        return "\n".join(lines)
