"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class RecordType(str, Enum):
    """Types of contract-governance records.

    Values are strings to ease serialization and CLI interchange.
    """

    CONTRACT_METADATA = "CONTRACT_METADATA"
    SCHEDULE = "SCHEDULE"
    DOCUMENT_REMINDER = "DOCUMENT_REMINDER"
    BUDGET = "BUDGET"
    VARIATION = "VARIATION"
    COMPLIANCE = "COMPLIANCE"


class CurrencyCode(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    AUD = "AUD"
    CAD = "CAD"
    SGD = "SGD"
    NZD = "NZD"


class RiskRating(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ScheduleStatus(str, Enum):
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    BLOCKED = "blocked"
    DONE = "done"


class ReminderChannel(str, Enum):
    EMAIL = "email"
    SLACK = "slack"


class VariationStatus(str, Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"


class CheckpointSeverity(str, Enum):
    INFO = "info"
    MINOR = "minor"
    MAJOR = "major"


class CheckpointStatus(str, Enum):
    PENDING = "pending"
    COLLECTED = "collected"
    FAILED = "failed"


__all__ = [
    "RecordType",
    "CurrencyCode",
    "RiskRating",
    "ScheduleStatus",
    "ReminderChannel",
    "VariationStatus",
    "CheckpointSeverity",
    "CheckpointStatus",
]
