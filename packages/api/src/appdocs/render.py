# This project was developed with assistance from AI tools.
"""CLI entrypoint for rendering a single application summary.

Usage:
    python -m appdocs.render <application_id>
    python -m appdocs.render <application_id> --output summary.pdf --base-uri https://cdn.example.com/templates/
"""

import argparse
import logging
import sys
import uuid
from pathlib import Path

from db import SessionLocal

from .core.config import settings
from .core.logging import configure_logging
from .services.factory import build_document_generator

logger = logging.getLogger(__name__)


def main(application_id: uuid.UUID, output: Path | None = None, base_uri: str | None = None) -> int:
    """Render the document and write it to ``output``. Returns the exit status."""
    configure_logging(settings.LOG_LEVEL)
    output = output or Path(f"application-{application_id}.pdf")

    with SessionLocal() as session:
        generator = build_document_generator(session, settings)
        content = generator.generate(application_id, base_uri or settings.TEMPLATE_BASE_URI)

    if content is None:
        logger.error("No document generated for application %s", application_id)
        return 1

    output.write_bytes(content)
    logger.info("Wrote %s (%d bytes)", output, len(content))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Render an application summary PDF")
    parser.add_argument("application_id", type=uuid.UUID, help="Application UUID")
    parser.add_argument("--output", type=Path, default=None, help="Destination PDF path")
    parser.add_argument(
        "--base-uri",
        default=None,
        help="Template base URI (defaults to TEMPLATE_BASE_URI)",
    )
    args = parser.parse_args()
    sys.exit(main(args.application_id, output=args.output, base_uri=args.base_uri))
