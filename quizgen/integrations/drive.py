"""Document download for catalog PDFs (Google Drive direct-download links or plain URLs)."""

import logging
import time

import httpx

from quizgen.config import settings

logger = logging.getLogger(__name__)


class DriveDocumentFetcher:
    """Async PDF downloader. Failures are logged and reported as None, never raised."""

    def __init__(self, timeout: int | None = None):
        self.timeout = timeout or settings.document_fetch_timeout

    async def fetch(self, source_id: str) -> bytes | None:
        """Download the document at ``source_id`` (a URL)."""
        start = time.monotonic()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                resp = await client.get(source_id)
                elapsed_ms = int((time.monotonic() - start) * 1000)

                if resp.status_code != 200:
                    logger.warning(
                        "Document fetch | status=%d | %dms | url=%s",
                        resp.status_code, elapsed_ms, source_id[:80],
                    )
                    return None

                logger.info(
                    "Document fetch OK | bytes=%d | %dms | url=%s",
                    len(resp.content), elapsed_ms, source_id[:80],
                )
                return resp.content

        except httpx.TimeoutException:
            elapsed_ms = int((time.monotonic() - start) * 1000)
            logger.warning("Document fetch timeout | %dms | url=%s", elapsed_ms, source_id[:80])
            return None
        except Exception as e:
            elapsed_ms = int((time.monotonic() - start) * 1000)
            logger.error("Document fetch error | %dms | %s", elapsed_ms, str(e)[:200])
            return None
