"""Shared pytest fixtures: fully valid records of every governance shape."""

import pytest


@pytest.fixture
def valid_contract():
    """A contract metadata record that passes every check."""
    return {
        "contractId": "C-2024-001",
        "vendor": "Acme Engineering",
        "title": "Bridge maintenance framework",
        "startDate": "2024-01-01",
        "endDate": "2026-12-31",
        "totalValue": 1250000,
        "currency": "AUD",
        "riskRating": "medium",
    }


@pytest.fixture
def valid_schedule():
    """Three valid schedule entries with mixed statuses."""
    return [
        {
            "taskId": "T-1",
            "milestone": "Mobilisation",
            "dueDate": "2024-02-15",
            "owner": "j.doe",
            "status": "done",
        },
        {
            "taskId": "T-2",
            "milestone": "Design review",
            "dueDate": "2024-05-01",
            "owner": "a.smith",
            "status": "in-progress",
        },
        {
            "taskId": "T-3",
            "milestone": "Handover",
            "dueDate": "2024-11-30",
            "owner": "a.smith",
            "status": "not-started",
        },
    ]


@pytest.fixture
def valid_reminder():
    return {
        "documentName": "Insurance certificate",
        "owner": "j.doe",
        "dueDate": "2024-06-30",
        "channel": "email",
        "notes": "Renewal due before site works resume",
    }


@pytest.fixture
def valid_budget():
    """A budget snapshot within its committed amount."""
    return {
        "contractId": "C-2024-001",
        "period": "Q1",
        "committed": 500000,
        "spent": 240000,
        "forecast": 510000,
        "currency": "USD",
    }


@pytest.fixture
def valid_variation():
    return {
        "requestId": "VO-7",
        "contractId": "C-2024-001",
        "description": "Additional drainage works",
        "estimatedImpact": 42000.5,
        "currency": "GBP",
        "status": "submitted",
    }


@pytest.fixture
def valid_checkpoints():
    return [
        {
            "clause": "12.3 Insurance",
            "controlOwner": "risk.team",
            "evidenceUrl": "https://example.org/evidence/123",
            "severity": "major",
            "status": "pending",
        },
        {
            "clause": "14.1 Safety plan",
            "controlOwner": "hse.lead",
            "severity": "minor",
            "status": "collected",
        },
    ]
