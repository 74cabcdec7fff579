# This project was developed with assistance from AI tools.
"""Tests for the application summary document generator."""

import logging
import uuid
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from db.enums import ApplicationState
from sqlalchemy.exc import MultipleResultsFound, NoResultFound

from appdocs.schemas.document import (
    ActivatedApplicationViewModel,
    InReviewApplicationViewModel,
    PendingApplicationViewModel,
)
from appdocs.services.document_generator import (
    PDF_OPTIONS,
    ApplicationDocumentGenerator,
    build_in_review_message,
    calculate_portfolio_total,
    normalize_base_uri,
    portfolio_funds,
)
from appdocs.services.pdf import PDF_HEADER_HTML, HeaderRepeat, PageNumbers
from appdocs.services.templates import TemplatePathProvider
from factories import (
    make_application,
    make_mock_pdf_generator,
    make_mock_renderer,
    make_mock_store,
)

BASE_URI = "https://x.com/"


def _make_generator(application, doc_settings, renderer=None, pdf_generator=None):
    return ApplicationDocumentGenerator(
        data_store=make_mock_store(application),
        template_path_provider=TemplatePathProvider(doc_settings.TEMPLATE_PATHS),
        view_generator=renderer or make_mock_renderer(),
        configuration=doc_settings,
        pdf_generator=pdf_generator or make_mock_pdf_generator(),
    )


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "missing",
    ["data_store", "template_path_provider", "view_generator", "configuration", "pdf_generator"],
)
def test_constructor_rejects_missing_dependency(missing, doc_settings):
    """Every collaborator is required."""
    deps = {
        "data_store": make_mock_store(None),
        "template_path_provider": TemplatePathProvider(doc_settings.TEMPLATE_PATHS),
        "view_generator": make_mock_renderer(),
        "configuration": doc_settings,
        "pdf_generator": make_mock_pdf_generator(),
    }
    deps[missing] = None

    with pytest.raises(ValueError, match=missing):
        ApplicationDocumentGenerator(**deps)


def test_constructor_accepts_all_dependencies(doc_settings):
    generator = _make_generator(make_application(), doc_settings)
    assert isinstance(generator, ApplicationDocumentGenerator)


# ---------------------------------------------------------------------------
# State dispatch
# ---------------------------------------------------------------------------


def test_pending_application_renders_pending_template(doc_settings):
    renderer = make_mock_renderer()
    app = make_application(ApplicationState.PENDING)
    generator = _make_generator(app, doc_settings, renderer=renderer)

    result = generator.generate(app.id, BASE_URI)

    assert result == b"%PDF-1.7 test document"
    url, view_model = renderer.render_from_path.call_args.args
    assert url == "https://x.com/pending_application.html"
    assert isinstance(view_model, PendingApplicationViewModel)
    assert view_model.reference_number == "APP-0042"
    assert view_model.state == "Pending"
    assert view_model.full_name == "Jane Doe"
    assert view_model.applied_on == app.date
    assert view_model.support_email == "help@example.com"
    assert view_model.signature == "The Client Services Team"


def test_activated_application_renders_portfolio(doc_settings):
    renderer = make_mock_renderer()
    app = make_application(ApplicationState.ACTIVATED)
    generator = _make_generator(app, doc_settings, renderer=renderer)

    result = generator.generate(app.id, BASE_URI)

    assert result
    url, view_model = renderer.render_from_path.call_args.args
    assert url == "https://x.com/activated_application.html"
    assert isinstance(view_model, ActivatedApplicationViewModel)
    assert view_model.state == "Activated"
    assert [f.name for f in view_model.portfolio_funds] == ["Fund 0", "Fund 1"]
    assert view_model.portfolio_total_amount == Decimal("27.0")
    assert view_model.legal_entity is None


def test_activated_legal_entity_included_only_when_flagged(doc_settings):
    renderer = make_mock_renderer()
    app = make_application(ApplicationState.ACTIVATED, is_legal_entity=True)
    generator = _make_generator(app, doc_settings, renderer=renderer)

    generator.generate(app.id, BASE_URI)

    _, view_model = renderer.render_from_path.call_args.args
    assert view_model.legal_entity is not None
    assert view_model.legal_entity.company_name == "Doe Trading (Pty) Ltd"
    assert view_model.legal_entity.registration_number == "2020/000001/07"


def test_in_review_application_renders_review_details(doc_settings):
    renderer = make_mock_renderer()
    app = make_application(ApplicationState.IN_REVIEW, reason="bank details incorrect")
    generator = _make_generator(app, doc_settings, renderer=renderer)

    result = generator.generate(app.id, BASE_URI)

    assert result
    url, view_model = renderer.render_from_path.call_args.args
    assert url == "https://x.com/in_review_application.html"
    assert isinstance(view_model, InReviewApplicationViewModel)
    assert view_model.state == "In Review"
    assert view_model.in_review_message.endswith("pending outstanding bank account verification.")
    assert view_model.in_review_information.reason == "bank details incorrect"
    assert view_model.in_review_information.details == {"reviewer": "compliance-team"}
    assert view_model.portfolio_total_amount == Decimal("27.0")


def test_in_review_without_review_record_uses_fallback_message(doc_settings):
    renderer = make_mock_renderer()
    app = make_application(ApplicationState.IN_REVIEW)
    app.current_review = None
    generator = _make_generator(app, doc_settings, renderer=renderer)

    generator.generate(app.id, BASE_URI)

    _, view_model = renderer.render_from_path.call_args.args
    assert view_model.in_review_message.endswith("Please contact support ASAP.")
    assert view_model.in_review_information is None


@pytest.mark.parametrize("state", [ApplicationState.CLOSED, ApplicationState.DECLINED])
def test_unsupported_state_returns_none_and_warns(state, doc_settings, caplog):
    renderer = make_mock_renderer()
    pdf_generator = make_mock_pdf_generator()
    app = make_application(state)
    generator = _make_generator(app, doc_settings, renderer=renderer, pdf_generator=pdf_generator)

    with caplog.at_level(logging.WARNING):
        result = generator.generate(app.id, BASE_URI)

    assert result is None
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert str(app.id) in warnings[0].getMessage()
    assert state.value in warnings[0].getMessage()
    renderer.render_from_path.assert_not_called()
    pdf_generator.generate_from_html.assert_not_called()


def test_absent_application_returns_none_and_warns(doc_settings, caplog):
    missing_id = uuid.uuid4()
    generator = _make_generator(None, doc_settings)

    with caplog.at_level(logging.WARNING):
        result = generator.generate(missing_id, BASE_URI)

    assert result is None
    assert f"No application found for id '{missing_id}'" in caplog.text


@pytest.mark.parametrize("error", [NoResultFound, MultipleResultsFound])
def test_strict_lookup_failure_propagates(error, doc_settings):
    generator = _make_generator(None, doc_settings)
    generator._data_store.find_application_by_id.side_effect = error("lookup failed")

    with pytest.raises(error):
        generator.generate(uuid.uuid4(), BASE_URI)


def test_injected_logger_receives_warnings(doc_settings):
    log = MagicMock()
    generator = ApplicationDocumentGenerator(
        data_store=make_mock_store(None),
        template_path_provider=TemplatePathProvider(doc_settings.TEMPLATE_PATHS),
        view_generator=make_mock_renderer(),
        configuration=doc_settings,
        pdf_generator=make_mock_pdf_generator(),
        log=log,
    )

    generator.generate(uuid.uuid4(), BASE_URI)

    log.warning.assert_called_once()


# ---------------------------------------------------------------------------
# Rendering and conversion
# ---------------------------------------------------------------------------


def test_base_uri_with_and_without_trailing_slash_render_same_url(doc_settings):
    app = make_application()
    with_slash = make_mock_renderer()
    without_slash = make_mock_renderer()

    _make_generator(app, doc_settings, renderer=with_slash).generate(app.id, "https://x.com/")
    _make_generator(app, doc_settings, renderer=without_slash).generate(app.id, "https://x.com")

    assert (
        with_slash.render_from_path.call_args.args[0]
        == without_slash.render_from_path.call_args.args[0]
        == "https://x.com/pending_application.html"
    )


def test_rendered_html_is_converted_with_fixed_options(doc_settings):
    renderer = make_mock_renderer(html="<html><body>rendered</body></html>")
    pdf_generator = make_mock_pdf_generator()
    app = make_application()

    _make_generator(app, doc_settings, renderer=renderer, pdf_generator=pdf_generator).generate(
        app.id, BASE_URI
    )

    html, options = pdf_generator.generate_from_html.call_args.args
    assert html == "<html><body>rendered</body></html>"
    assert options == PDF_OPTIONS
    assert options.page_numbers == PageNumbers.NUMERIC
    assert options.header_options.header_repeat == HeaderRepeat.FIRST_PAGE_ONLY
    assert options.header_options.header_html == PDF_HEADER_HTML


def test_repeated_generation_is_byte_identical(doc_settings):
    app = make_application(ApplicationState.ACTIVATED)
    generator = _make_generator(app, doc_settings)

    assert generator.generate(app.id, BASE_URI) == generator.generate(app.id, BASE_URI)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("reason", "ending"),
    [
        ("address mismatch", " pending outstanding address verification for FICA purposes."),
        ("bank details incorrect", " pending outstanding bank account verification."),
        ("flagged", " because of suspicious account behaviour. Please contact support ASAP."),
        ("bank and address both wrong", " pending outstanding address verification for FICA purposes."),
        ("Address on file", " because of suspicious account behaviour. Please contact support ASAP."),
        (None, " because of suspicious account behaviour. Please contact support ASAP."),
    ],
)
def test_build_in_review_message(reason, ending):
    message = build_in_review_message(reason)
    assert message == "Your application has been placed in review" + ending


def test_portfolio_total_example():
    app = make_application(funds=(("100", "10"), ("50", "5")))
    total = calculate_portfolio_total(portfolio_funds(app), Decimal("0.2"))
    assert total == Decimal("27.0")


def test_portfolio_total_empty_is_zero():
    assert calculate_portfolio_total([], Decimal("0.2")) == Decimal("0")


def test_portfolio_funds_flattens_products_in_order():
    from db import Fund, Product

    app = make_application(funds=(("10", "0"),))
    app.products.append(
        Product(name="Second", funds=[Fund(name="Later", amount=Decimal("1"), fees=Decimal("0"))])
    )

    assert [f.name for f in portfolio_funds(app)] == ["Fund 0", "Later"]


@pytest.mark.parametrize(
    ("base_uri", "expected"),
    [
        ("https://x.com/", "https://x.com"),
        ("https://x.com", "https://x.com"),
        ("https://x.com//", "https://x.com/"),
    ],
)
def test_normalize_base_uri_strips_one_separator(base_uri, expected):
    assert normalize_base_uri(base_uri) == expected
