"""Derived summaries over validated governance records.

These functions assume their input already passed the matching validator:
records are fully populated and well-typed. They perform no defensive checks,
so a missing field raises ``KeyError`` and a mistyped amount raises
``TypeError``. Validate first.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping

from contract_governance.core.enums import ScheduleStatus
from contract_governance.validation.predicates import is_iso_date


def _text(value: Any) -> str:
    """Render enum members by value so ``CurrencyCode.USD`` prints as ``USD``."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _format_amount(value: Any) -> str:
    """Render an amount the way the host renders numbers.

    Integral floats drop the ``.0``; magnitudes from ``1e21`` up and below
    ``1e-6`` use exponent form (``1e+21``, ``1.5e-7``); non-finite values
    print as ``Infinity``, ``-Infinity`` and ``NaN``.
    """
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        if abs(value) < 10**21:
            return str(value)
        value = float(value)
    if not isinstance(value, float):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + _format_amount(-value)

    # repr gives the shortest round-tripping digits; re-place the point
    mantissa, _, exponent = repr(value).partition("e")
    whole, _, fraction = mantissa.partition(".")
    digits = (whole + fraction).lstrip("0")
    point = len(whole) + int(exponent or 0) - (len(whole + fraction) - len(digits))
    digits = digits.rstrip("0")
    size = len(digits)

    if size <= point <= 21:
        return digits + "0" * (point - size)
    if 0 < point <= 21:
        return f"{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return "0." + "0" * -point + digits
    power = point - 1
    sign = "+" if power >= 0 else "-"
    head = digits if size == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{head}e{sign}{abs(power)}"


def summarize_budget(snapshot: Mapping[str, Any]) -> str:
    """Build the one-line budget narrative for a snapshot.

    Args:
        snapshot: A validated BudgetSnapshot.

    Returns:
        Summary embedding period, committed amount, currency, spent amount,
        variance (spent - committed) and forecast delta (forecast - committed).

    Examples:
        >>> summarize_budget({
        ...     "period": "Q1", "committed": 500000, "spent": 240000,
        ...     "forecast": 510000, "currency": "USD",
        ... })
        'Period Q1: committed 500000 USD, spent 240000, variance -260000, forecast delta 10000'
    """
    committed = snapshot["committed"]
    spent = snapshot["spent"]
    variance = spent - committed
    forecast_delta = snapshot["forecast"] - committed
    return (
        f"Period {_text(snapshot['period'])}: "
        f"committed {_format_amount(committed)} {_text(snapshot['currency'])}, "
        f"spent {_format_amount(spent)}, "
        f"variance {_format_amount(variance)}, "
        f"forecast delta {_format_amount(forecast_delta)}"
    )


def schedule_lag(
    entries: Iterable[Mapping[str, Any]], reference_date: str
) -> List[Mapping[str, Any]]:
    """Select schedule entries that are overdue at ``reference_date``.

    An entry lags when it is not done and its due date sorts before the
    reference date. Dates are compared as YYYY-MM-DD strings, which only
    orders correctly when both sides are well formed, so a malformed
    reference date selects nothing and a malformed due date excludes its entry.

    Args:
        entries: Validated ScheduleEntry records.
        reference_date: Date to measure lag against (YYYY-MM-DD).

    Returns:
        Lagging entries, in input order.
    """
    if not is_iso_date(reference_date):
        return []
    return [
        entry
        for entry in entries
        if is_iso_date(entry["dueDate"])
        and entry["status"] != ScheduleStatus.DONE.value
        and entry["dueDate"] < reference_date
    ]


def compliance_summary(checkpoints: Iterable[Mapping[str, Any]]) -> Dict[str, int]:
    """Count checkpoints per ``"<severity>:<status>"`` pair.

    Keys appear in order of first occurrence.

    Examples:
        >>> compliance_summary([
        ...     {"severity": "major", "status": "pending"},
        ...     {"severity": "minor", "status": "collected"},
        ...     {"severity": "major", "status": "pending"},
        ... ])
        {'major:pending': 2, 'minor:collected': 1}
    """
    counts: Dict[str, int] = {}
    for checkpoint in checkpoints:
        key = f"{_text(checkpoint['severity'])}:{_text(checkpoint['status'])}"
        counts[key] = counts.get(key, 0) + 1
    return counts


__all__ = ["summarize_budget", "schedule_lag", "compliance_summary"]
