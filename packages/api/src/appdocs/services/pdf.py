# This project was developed with assistance from AI tools.
"""HTML to PDF conversion with WeasyPrint.

Page numbers and the document header are expressed as CSS paged-media rules
(``@page`` margin boxes and running elements) applied on top of the
template's own styles.
"""

import enum
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

PDF_HEADER_HTML = (
    '<div class="document-header">'
    "<strong>Application Summary</strong>"
    '<span class="document-header__note">Private and confidential</span>'
    "</div>"
)

_HEADER_ELEMENT_ID = "pdf-running-header"


class PageNumbers(str, enum.Enum):
    NONE = "none"
    NUMERIC = "numeric"
    ROMAN = "roman"


class HeaderRepeat(str, enum.Enum):
    FIRST_PAGE_ONLY = "first_page_only"
    ALL_PAGES = "all_pages"


@dataclass(frozen=True)
class HeaderOptions:
    header_repeat: HeaderRepeat = HeaderRepeat.FIRST_PAGE_ONLY
    header_html: str = PDF_HEADER_HTML


@dataclass(frozen=True)
class PdfOptions:
    page_numbers: PageNumbers = PageNumbers.NONE
    header_options: HeaderOptions | None = field(default=None)


class PdfDocument:
    """Rendered document; call ``to_bytes()`` to serialise it."""

    def __init__(self, document):
        self._document = document

    @property
    def page_count(self) -> int:
        return len(self._document.pages)

    def to_bytes(self) -> bytes:
        return self._document.write_pdf()


def build_page_css(options: PdfOptions) -> str:
    """Translate PdfOptions into paged-media CSS."""
    rules: list[str] = []

    if options.page_numbers == PageNumbers.NUMERIC:
        rules.append("@page { @bottom-center { content: counter(page); } }")
    elif options.page_numbers == PageNumbers.ROMAN:
        rules.append("@page { @bottom-center { content: counter(page, lower-roman); } }")

    header = options.header_options
    if header is not None:
        rules.append(f"#{_HEADER_ELEMENT_ID} {{ position: running({_HEADER_ELEMENT_ID}); }}")
        selector = "@page :first" if header.header_repeat == HeaderRepeat.FIRST_PAGE_ONLY else "@page"
        rules.append(
            f"{selector} {{ @top-center {{ content: element({_HEADER_ELEMENT_ID}); }} }}"
        )

    return "\n".join(rules)


def inject_header(html: str, header: HeaderOptions | None) -> str:
    """Place the running header element at the start of the body."""
    if header is None:
        return html
    element = f'<div id="{_HEADER_ELEMENT_ID}">{header.header_html}</div>'
    lowered = html.lower()
    body_at = lowered.find("<body")
    if body_at == -1:
        return element + html
    insert_at = lowered.find(">", body_at) + 1
    return html[:insert_at] + element + html[insert_at:]


class WeasyPrintPdfGenerator:
    """Converts rendered HTML into a PDF document."""

    def __init__(self, base_url: str | None = None):
        self._base_url = base_url

    def generate_from_html(self, html: str, options: PdfOptions) -> PdfDocument:
        # Lazy import to avoid loading WeasyPrint's native libraries until needed
        from weasyprint import CSS, HTML

        stylesheets = []
        page_css = build_page_css(options)
        if page_css:
            stylesheets.append(CSS(string=page_css))

        document = HTML(
            string=inject_header(html, options.header_options),
            base_url=self._base_url,
        ).render(stylesheets=stylesheets)
        logger.debug("Rendered PDF with %d page(s)", len(document.pages))
        return PdfDocument(document)
