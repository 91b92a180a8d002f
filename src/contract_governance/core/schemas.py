"""Record shapes and field definitions for contract-governance data.

Records arrive from the host workflow as plain mappings keyed by camelCase
field names. Every shape is declared with ``total=False`` because validators
receive partial records: any field may be absent.

Field lists below are in declaration order, which is also the order in which
validators check fields and report errors.
"""

from __future__ import annotations

from typing import Dict, List, Optional, TypedDict, Union

from .enums import (
    CheckpointSeverity,
    CheckpointStatus,
    CurrencyCode,
    RecordType,
    ReminderChannel,
    RiskRating,
    ScheduleStatus,
    VariationStatus,
)

Amount = Union[int, float]


class ContractMetadata(TypedDict, total=False):
    contractId: str
    vendor: str
    title: str
    startDate: str
    endDate: str
    totalValue: Amount
    currency: Union[CurrencyCode, str]
    riskRating: Union[RiskRating, str]


class ScheduleEntry(TypedDict, total=False):
    taskId: str
    milestone: str
    dueDate: str
    owner: str
    status: Union[ScheduleStatus, str]


class DocumentReminder(TypedDict, total=False):
    documentName: str
    owner: str
    dueDate: str
    channel: Union[ReminderChannel, str]
    notes: Optional[str]


class BudgetSnapshot(TypedDict, total=False):
    contractId: str
    period: str
    committed: Amount
    spent: Amount
    forecast: Amount
    currency: Union[CurrencyCode, str]


class VariationOrder(TypedDict, total=False):
    requestId: str
    contractId: str
    description: str
    estimatedImpact: Amount
    currency: Union[CurrencyCode, str]
    status: Union[VariationStatus, str]


class ComplianceCheckpoint(TypedDict, total=False):
    clause: str
    controlOwner: str
    evidenceUrl: Optional[str]
    severity: Union[CheckpointSeverity, str]
    status: Union[CheckpointStatus, str]


_SHAPES: Dict[RecordType, type] = {
    RecordType.CONTRACT_METADATA: ContractMetadata,
    RecordType.SCHEDULE: ScheduleEntry,
    RecordType.DOCUMENT_REMINDER: DocumentReminder,
    RecordType.BUDGET: BudgetSnapshot,
    RecordType.VARIATION: VariationOrder,
    RecordType.COMPLIANCE: ComplianceCheckpoint,
}

_NUMERIC_FIELDS = {"totalValue", "committed", "spent", "forecast", "estimatedImpact"}

# Record types validated as a whole sequence (errors carry the entry index)
# rather than one record at a time.
SEQUENCE_RECORD_TYPES = frozenset({RecordType.SCHEDULE, RecordType.COMPLIANCE})


def get_fields(record_type: RecordType) -> List[str]:
    """Get all fields of a record type in declaration order.

    Examples:
        >>> get_fields(RecordType.DOCUMENT_REMINDER)
        ['documentName', 'owner', 'dueDate', 'channel', 'notes']
    """
    return list(_SHAPES[record_type].__annotations__)


def get_text_fields(record_type: RecordType) -> List[str]:
    """Get the non-numeric fields of a record type.

    Used when reading tabular files so identifiers such as ``"001"`` stay text.
    """
    return [f for f in get_fields(record_type) if f not in _NUMERIC_FIELDS]


def is_sequence_type(record_type: RecordType) -> bool:
    return record_type in SEQUENCE_RECORD_TYPES


__all__ = [
    "ContractMetadata",
    "ScheduleEntry",
    "DocumentReminder",
    "BudgetSnapshot",
    "VariationOrder",
    "ComplianceCheckpoint",
    "SEQUENCE_RECORD_TYPES",
    "get_fields",
    "get_text_fields",
    "is_sequence_type",
]
