"""PDF text extraction — one text fragment per page."""

import io
import logging

from pypdf import PdfReader

logger = logging.getLogger(__name__)


def extract_pages(data: bytes) -> list[str]:
    """Return the text of every page; blank pages become empty strings.

    Raises pypdf errors for unreadable documents; callers decide how to degrade.
    """
    reader = PdfReader(io.BytesIO(data))
    pages = [page.extract_text() or "" for page in reader.pages]
    logger.debug("PDF extracted | pages=%d | chars=%d", len(pages), sum(len(p) for p in pages))
    return pages
