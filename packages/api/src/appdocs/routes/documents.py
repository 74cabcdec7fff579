# This project was developed with assistance from AI tools.
"""Application summary document download."""

import logging
import uuid

from db import get_db
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ..core.config import settings
from ..services.document_generator import ApplicationDocumentGenerator
from ..services.factory import build_document_generator

logger = logging.getLogger(__name__)

router = APIRouter()


def get_document_generator(session: Session = Depends(get_db)) -> ApplicationDocumentGenerator:
    return build_document_generator(session, settings)


@router.get(
    "/applications/{application_id}/document",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
def download_application_document(
    application_id: uuid.UUID,
    generator: ApplicationDocumentGenerator = Depends(get_document_generator),
) -> Response:
    """Render the summary PDF for an application.

    The template base URI always comes from configuration, never the request.
    """
    content = generator.generate(application_id, settings.TEMPLATE_BASE_URI)
    if content is None:
        raise HTTPException(
            status_code=404,
            detail=f"No document is available for application {application_id}",
        )
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="application-{application_id}.pdf"'},
    )
