# This project was developed with assistance from AI tools.
"""Wiring of the document generator from settings and a database session."""

from sqlalchemy.orm import Session

from ..core.config import Settings
from .document_generator import ApplicationDocumentGenerator
from .pdf import WeasyPrintPdfGenerator
from .rendering import JinjaViewRenderer
from .store import SqlApplicationStore
from .templates import TemplatePathProvider


def build_document_generator(session: Session, config: Settings) -> ApplicationDocumentGenerator:
    """Assemble a generator backed by SQLAlchemy, Jinja2 and WeasyPrint."""
    return ApplicationDocumentGenerator(
        data_store=SqlApplicationStore(session),
        template_path_provider=TemplatePathProvider(config.TEMPLATE_PATHS),
        view_generator=JinjaViewRenderer(timeout=config.TEMPLATE_FETCH_TIMEOUT),
        configuration=config,
        pdf_generator=WeasyPrintPdfGenerator(base_url=config.TEMPLATE_BASE_URI),
    )
