"""Validation configuration constants.

This module centralizes validation message texts and severity rules.
Messages are part of the observable contract with the host workflow: hosts
route and deduplicate alerts by exact message text, so change them here only.

Severity Levels:
    - "error": Missing, malformed or mistyped fields
    - "warning": Business-rule findings that warrant review but may be legitimate
      (e.g., an overrun already covered by a pending variation order)
"""

from __future__ import annotations

import re

# ============================================================================
# FORMAT CONSTANTS
# ============================================================================

# Structural YYYY-MM-DD check only; calendar validity is not checked
ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


# ============================================================================
# MESSAGE TEMPLATES
# ============================================================================

REQUIRED_MESSAGE = "{field} is required"
DATE_FORMAT_MESSAGE = "{field} must be YYYY-MM-DD"
NUMBER_MESSAGE = "{field} must be a number"
NUMERIC_MESSAGE = "{field} must be numeric"
POSITIVE_MESSAGE = "{field} must be > 0"
TEXT_MESSAGE = "{field} must be text"

# Per-entry messages for sequence validators
MISSING_AT_INDEX_MESSAGE = "{field} missing at index {index}"
INVALID_AT_INDEX_MESSAGE = "{field} invalid at index {index}"

BUDGET_OVERRUN_MESSAGE = "spent cannot exceed committed without a variation order"


# ============================================================================
# SEVERITY RULES
# ============================================================================

DEFAULT_SEVERITY = "error"

# Messages reported as warnings; everything else is an error
WARNING_MESSAGES = frozenset({BUDGET_OVERRUN_MESSAGE})


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def get_severity(message: str) -> str:
    """Get severity level for a validation message.

    Args:
        message: Error message produced by a validator.

    Returns:
        Severity level: "error" or "warning".

    Examples:
        >>> get_severity("period is required")
        'error'
        >>> get_severity(BUDGET_OVERRUN_MESSAGE)
        'warning'
    """
    if message in WARNING_MESSAGES:
        return "warning"
    return DEFAULT_SEVERITY
