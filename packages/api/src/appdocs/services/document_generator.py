# This project was developed with assistance from AI tools.
"""Application summary PDF generation.

Loads an application, picks the template and view-model for its state,
renders HTML through the view renderer and converts it to PDF bytes.

Two outcomes produce no document and are only distinguishable in the logs:
the store reports the application as absent (returns None), or the
application is in a state no document exists for. A store that raises on a
missing or duplicated id propagates that error unchanged.
"""

import logging
import uuid
from collections.abc import Iterable
from decimal import Decimal

from db import Application, Fund
from db.enums import ApplicationState

from ..core.config import Settings
from ..schemas.document import (
    ActivatedApplicationViewModel,
    ApplicationViewModel,
    FundSummary,
    InReviewApplicationViewModel,
    LegalEntitySummary,
    PendingApplicationViewModel,
    ReviewSummary,
)
from .pdf import (
    PDF_HEADER_HTML,
    HeaderOptions,
    HeaderRepeat,
    PageNumbers,
    PdfOptions,
    WeasyPrintPdfGenerator,
)
from .rendering import JinjaViewRenderer
from .store import ApplicationStore
from .templates import TemplatePathProvider

logger = logging.getLogger(__name__)

PENDING_TEMPLATE = "PendingApplication"
ACTIVATED_TEMPLATE = "ActivatedApplication"
IN_REVIEW_TEMPLATE = "InReviewApplication"

IN_REVIEW_MESSAGE_BASE = "Your application has been placed in review"
_ADDRESS_SUFFIX = " pending outstanding address verification for FICA purposes."
_BANK_SUFFIX = " pending outstanding bank account verification."
_DEFAULT_SUFFIX = " because of suspicious account behaviour. Please contact support ASAP."

PDF_OPTIONS = PdfOptions(
    page_numbers=PageNumbers.NUMERIC,
    header_options=HeaderOptions(
        header_repeat=HeaderRepeat.FIRST_PAGE_ONLY,
        header_html=PDF_HEADER_HTML,
    ),
)


def build_in_review_message(reason: str | None) -> str:
    """Explain a review to the applicant based on the review reason.

    Matching is case-sensitive and "address" takes precedence over "bank".
    """
    if reason is not None and "address" in reason:
        suffix = _ADDRESS_SUFFIX
    elif reason is not None and "bank" in reason:
        suffix = _BANK_SUFFIX
    else:
        suffix = _DEFAULT_SUFFIX
    return IN_REVIEW_MESSAGE_BASE + suffix


def calculate_portfolio_total(funds: Iterable[Fund], tax_rate: Decimal) -> Decimal:
    """Sum of (amount - fees) * tax_rate over every fund."""
    return sum(
        ((fund.amount - fund.fees) * tax_rate for fund in funds),
        Decimal("0"),
    )


def portfolio_funds(application: Application) -> list[Fund]:
    """All funds across the application's products, in product order."""
    return [fund for product in application.products for fund in product.funds]


def normalize_base_uri(base_uri: str) -> str:
    if base_uri.endswith("/"):
        return base_uri[:-1]
    return base_uri


class ApplicationDocumentGenerator:
    """Builds the PDF summary document for a single application."""

    def __init__(
        self,
        data_store: ApplicationStore,
        template_path_provider: TemplatePathProvider,
        view_generator: JinjaViewRenderer,
        configuration: Settings,
        pdf_generator: WeasyPrintPdfGenerator,
        log: logging.Logger | None = None,
    ):
        for name, dependency in (
            ("data_store", data_store),
            ("template_path_provider", template_path_provider),
            ("view_generator", view_generator),
            ("configuration", configuration),
            ("pdf_generator", pdf_generator),
        ):
            if dependency is None:
                raise ValueError(f"{name} is required")

        self._data_store = data_store
        self._template_path_provider = template_path_provider
        self._view_generator = view_generator
        self._configuration = configuration
        self._pdf_generator = pdf_generator
        self._logger = log or logger

    def generate(self, application_id: uuid.UUID, base_uri: str) -> bytes | None:
        """Render the summary PDF, or return None when no document applies."""
        application = self._data_store.find_application_by_id(application_id)
        if application is None:
            self._logger.warning("No application found for id '%s'", application_id)
            return None

        base_uri = normalize_base_uri(base_uri)

        match application.state:
            case ApplicationState.PENDING:
                template_name = PENDING_TEMPLATE
                view_model = self._pending_view_model(application)
            case ApplicationState.ACTIVATED:
                template_name = ACTIVATED_TEMPLATE
                view_model = self._activated_view_model(application)
            case ApplicationState.IN_REVIEW:
                template_name = IN_REVIEW_TEMPLATE
                view_model = self._in_review_view_model(application)
            case _:
                self._logger.warning(
                    "Application '%s' is in state '%s' and no valid document can be generated for it",
                    application.id,
                    application.state.value,
                )
                return None

        html = self._render(base_uri, template_name, view_model)
        pdf = self._pdf_generator.generate_from_html(html, PDF_OPTIONS)
        content = pdf.to_bytes()
        self._logger.info(
            "Generated %s document for application '%s' (%d bytes)",
            template_name,
            application.id,
            len(content),
        )
        return content

    def _render(self, base_uri: str, template_name: str, view_model: ApplicationViewModel) -> str:
        path = self._template_path_provider.path_for(template_name)
        full_url = f"{base_uri}{path}"
        self._logger.debug("Rendering %s from %s", template_name, full_url)
        return self._view_generator.render_from_path(full_url, view_model)

    # -- View-model builders --

    def _common_fields(self, application: Application) -> dict:
        return {
            "reference_number": application.reference_number,
            "state": application.state.description,
            "full_name": f"{application.person.first_name} {application.person.surname}",
            "applied_on": application.date,
            "support_email": self._configuration.SUPPORT_EMAIL,
            "signature": self._configuration.SIGNATURE,
        }

    def _portfolio_fields(self, application: Application) -> dict:
        funds = portfolio_funds(application)
        legal_entity = application.legal_entity if application.is_legal_entity else None
        return {
            "legal_entity": (
                LegalEntitySummary.model_validate(legal_entity) if legal_entity is not None else None
            ),
            "portfolio_funds": [FundSummary.model_validate(fund) for fund in funds],
            "portfolio_total_amount": calculate_portfolio_total(
                funds, self._configuration.TAX_RATE
            ),
        }

    def _pending_view_model(self, application: Application) -> PendingApplicationViewModel:
        return PendingApplicationViewModel(**self._common_fields(application))

    def _activated_view_model(self, application: Application) -> ActivatedApplicationViewModel:
        return ActivatedApplicationViewModel(
            **self._common_fields(application),
            **self._portfolio_fields(application),
        )

    def _in_review_view_model(self, application: Application) -> InReviewApplicationViewModel:
        review = application.current_review
        reason = review.reason if review is not None else None
        return InReviewApplicationViewModel(
            **self._common_fields(application),
            **self._portfolio_fields(application),
            in_review_message=build_in_review_message(reason),
            in_review_information=(
                ReviewSummary.model_validate(review) if review is not None else None
            ),
        )
