# This project was developed with assistance from AI tools.
"""View-models passed to the application summary templates.

One model per documented application state. They are flat on purpose so a
template only ever sees the fields its state carries.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict


class FundSummary(BaseModel):
    """A single fund line in the portfolio table."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    name: str
    amount: Decimal
    fees: Decimal


class LegalEntitySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    company_name: str
    registration_number: str
    country_of_incorporation: str | None = None


class ReviewSummary(BaseModel):
    """Raw review record shown on in-review documents."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    reason: str | None = None
    reviewed_at: datetime | None = None
    details: dict[str, Any] | None = None


class PendingApplicationViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    reference_number: str
    state: str
    full_name: str
    applied_on: date
    support_email: str
    signature: str


class ActivatedApplicationViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    reference_number: str
    state: str
    full_name: str
    legal_entity: LegalEntitySummary | None = None
    portfolio_funds: list[FundSummary]
    portfolio_total_amount: Decimal
    applied_on: date
    support_email: str
    signature: str


class InReviewApplicationViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    reference_number: str
    state: str
    full_name: str
    legal_entity: LegalEntitySummary | None = None
    portfolio_funds: list[FundSummary]
    portfolio_total_amount: Decimal
    in_review_message: str
    in_review_information: ReviewSummary | None = None
    applied_on: date
    support_email: str
    signature: str


ApplicationViewModel = (
    PendingApplicationViewModel | ActivatedApplicationViewModel | InReviewApplicationViewModel
)
