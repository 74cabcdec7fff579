# This project was developed with assistance from AI tools.
"""
Demo fixture data.

One application per interesting document path: pending, activated
(individual and legal entity), in review for each review message branch,
and a declined application that produces no document. Application ids are
deterministic so they can be passed straight to the render CLI.

Simulated for demonstration purposes -- not real financial data.
"""

import uuid
from datetime import UTC, date, datetime
from decimal import Decimal

from db.enums import ApplicationState

PENDING_APPLICATION_ID = uuid.UUID("6f1c1f64-2d1b-4d43-9a51-000000000001")
ACTIVATED_APPLICATION_ID = uuid.UUID("6f1c1f64-2d1b-4d43-9a51-000000000002")
ACTIVATED_ENTITY_APPLICATION_ID = uuid.UUID("6f1c1f64-2d1b-4d43-9a51-000000000003")
ADDRESS_REVIEW_APPLICATION_ID = uuid.UUID("6f1c1f64-2d1b-4d43-9a51-000000000004")
BANK_REVIEW_APPLICATION_ID = uuid.UUID("6f1c1f64-2d1b-4d43-9a51-000000000005")
DECLINED_APPLICATION_ID = uuid.UUID("6f1c1f64-2d1b-4d43-9a51-000000000006")

_BALANCED_FUNDS = [
    {"name": "Global Equity Fund", "amount": Decimal("25000.00"), "fees": Decimal("312.50")},
    {"name": "Income Bond Fund", "amount": Decimal("15000.00"), "fees": Decimal("120.00")},
]

_MONEY_MARKET_FUNDS = [
    {"name": "Money Market Fund", "amount": Decimal("5000.00"), "fees": Decimal("0.00")},
]

DEMO_APPLICATIONS: list[dict] = [
    {
        "id": PENDING_APPLICATION_ID,
        "reference_number": "APP-1001",
        "state": ApplicationState.PENDING,
        "date": date(2026, 9, 14),
        "person": {"first_name": "Thandi", "surname": "Nkosi", "email": "thandi@example.com"},
        "products": [{"name": "Tax-Free Savings", "funds": _MONEY_MARKET_FUNDS}],
    },
    {
        "id": ACTIVATED_APPLICATION_ID,
        "reference_number": "APP-1002",
        "state": ApplicationState.ACTIVATED,
        "date": date(2026, 8, 3),
        "person": {"first_name": "Pieter", "surname": "van Wyk", "email": "pieter@example.com"},
        "products": [
            {"name": "Balanced Portfolio", "funds": _BALANCED_FUNDS},
            {"name": "Tax-Free Savings", "funds": _MONEY_MARKET_FUNDS},
        ],
    },
    {
        "id": ACTIVATED_ENTITY_APPLICATION_ID,
        "reference_number": "APP-1003",
        "state": ApplicationState.ACTIVATED,
        "date": date(2026, 7, 21),
        "person": {"first_name": "Aisha", "surname": "Patel", "email": "aisha@example.com"},
        "legal_entity": {
            "company_name": "Patel Holdings (Pty) Ltd",
            "registration_number": "2019/123456/07",
            "country_of_incorporation": "South Africa",
        },
        "products": [{"name": "Corporate Investment", "funds": _BALANCED_FUNDS}],
    },
    {
        "id": ADDRESS_REVIEW_APPLICATION_ID,
        "reference_number": "APP-1004",
        "state": ApplicationState.IN_REVIEW,
        "date": date(2026, 9, 1),
        "person": {"first_name": "Johan", "surname": "Botha", "email": "johan@example.com"},
        "review": {
            "reason": "Proof of address older than three months",
            "reviewed_at": datetime(2026, 9, 2, 9, 30, tzinfo=UTC),
            "details": {"reviewer": "compliance-team", "document": "utility_bill"},
        },
        "products": [{"name": "Balanced Portfolio", "funds": _BALANCED_FUNDS}],
    },
    {
        "id": BANK_REVIEW_APPLICATION_ID,
        "reference_number": "APP-1005",
        "state": ApplicationState.IN_REVIEW,
        "date": date(2026, 9, 5),
        "person": {"first_name": "Lerato", "surname": "Mokoena", "email": "lerato@example.com"},
        "review": {
            "reason": "Debit order rejected by bank",
            "reviewed_at": datetime(2026, 9, 6, 14, 0, tzinfo=UTC),
            "details": {"reviewer": "operations"},
        },
        "products": [{"name": "Tax-Free Savings", "funds": _MONEY_MARKET_FUNDS}],
    },
    {
        "id": DECLINED_APPLICATION_ID,
        "reference_number": "APP-1006",
        "state": ApplicationState.DECLINED,
        "date": date(2026, 6, 30),
        "person": {"first_name": "Sipho", "surname": "Dlamini", "email": None},
        "products": [],
    },
]
