"""Contract Governance: validation and summary steps for governance records.

Host workflows call the validators with plain records and route the returned
``ValidationResult`` messages; summaries are computed over validated records.
A small CLI (validate, summarize) operates on YAML/JSON/CSV record files.
"""

__version__ = "0.1.0"

from contract_governance.core.enums import (  # noqa: E402
    CheckpointSeverity,
    CheckpointStatus,
    CurrencyCode,
    RecordType,
    ReminderChannel,
    RiskRating,
    ScheduleStatus,
    VariationStatus,
)
from contract_governance.summaries import (  # noqa: E402
    compliance_summary,
    schedule_lag,
    summarize_budget,
)
from contract_governance.validation import (  # noqa: E402
    ValidationReport,
    ValidationResult,
    run_validation,
    validate_budget,
    validate_compliance,
    validate_contract_metadata,
    validate_document_reminder,
    validate_schedule,
    validate_variation,
)

__all__ = [
    "__version__",
    # Validators
    "validate_contract_metadata",
    "validate_schedule",
    "validate_document_reminder",
    "validate_budget",
    "validate_variation",
    "validate_compliance",
    # Summaries
    "summarize_budget",
    "schedule_lag",
    "compliance_summary",
    # Models and runner
    "ValidationResult",
    "ValidationReport",
    "run_validation",
    # Enums
    "RecordType",
    "CurrencyCode",
    "RiskRating",
    "ScheduleStatus",
    "ReminderChannel",
    "VariationStatus",
    "CheckpointSeverity",
    "CheckpointStatus",
]
