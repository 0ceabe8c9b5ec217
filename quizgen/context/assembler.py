"""Context assembly — book pages relevant to a quiz request.

Two cached hops:
  1. raw pages per document (content tier), keyed by download URL
  2. selected context per course/book/topic (context tier)

Empty results are cached negatively at both tiers. A failure on one document
is logged and skipped; assembly itself never raises.
"""

import asyncio
import logging
from typing import Awaitable, Callable

from quizgen.cache import SingleFlight, TTLStore, context_key
from quizgen.context.scoring import Selection, select_relevant_context
from quizgen.integrations.pdf_text import extract_pages
from quizgen.orchestrator.schemas import ContextBundle, QuizRequest
from quizgen.utils.books_data import BookEntry, candidates_for, to_drive_download_url

logger = logging.getLogger(__name__)

Fetch = Callable[[str], Awaitable[bytes | None]]
Extract = Callable[[bytes], list[str]]
Score = Callable[..., Selection]


class ContextAssembler:
    """Builds grounded context for the generation backend."""

    def __init__(
        self,
        fetch: Fetch,
        content_cache: TTLStore[list[str]],
        context_cache: TTLStore[ContextBundle],
        extract: Extract = extract_pages,
        score: Score = select_relevant_context,
        books: list[BookEntry] | None = None,
        max_chars_per_document: int = 6000,
        max_total_chars: int = 14000,
        max_fragments: int = 12,
        min_fragment_chars: int = 100,
    ):
        self.fetch = fetch
        self.content_cache = content_cache
        self.context_cache = context_cache
        self.extract = extract
        self.score = score
        self.books = books
        self.max_chars_per_document = max_chars_per_document
        self.max_total_chars = max_total_chars
        self.max_fragments = max_fragments
        self.min_fragment_chars = min_fragment_chars
        self._downloads: SingleFlight[list[str]] = SingleFlight("documents")

    async def assemble(self, request: QuizRequest) -> ContextBundle:
        try:
            return await self._assemble(request)
        except Exception as e:
            logger.error("Context assembly failed | topic=%s | %s", request.topic[:80], str(e)[:200])
            return ContextBundle()

    async def _assemble(self, request: QuizRequest) -> ContextBundle:
        key = context_key(request)
        cached = self.context_cache.get(key)
        if cached is not None:
            logger.info("Context cache HIT | topic=%s | negative=%s", request.topic[:80], cached.negative)
            return ContextBundle() if cached.negative else cached.value

        bundle = await self.collect(
            candidates_for(request.course_name, request.book_title, self.books),
            request.topic,
        )

        if bundle.is_empty:
            self.context_cache.set_negative(key)
        else:
            self.context_cache.set(key, bundle)
        return bundle

    async def collect(self, books: list[BookEntry], topic: str) -> ContextBundle:
        """Select context for ``topic`` from ``books``, stopping at the total budget."""
        sections: list[str] = []
        references: list[str] = []
        total = 0

        for book in books:
            try:
                selection = await self._select_from(book, topic)
            except Exception as e:
                logger.warning("Context skipped | book=%s | %s", book.title[:80], str(e)[:200])
                continue

            if not selection.context:
                continue
            section = f"Fuente: {book.title} ({book.subject})\n{selection.context}"
            sections.append(section)
            references.append(book.title)
            total += len(section)
            if total > self.max_total_chars:
                break

        logger.info("Context assembled | topic=%s | books=%d | chars=%d", topic[:80], len(references), total)
        return ContextBundle(context="\n\n".join(sections), references=references)

    async def _select_from(self, book: BookEntry, topic: str) -> Selection:
        url = to_drive_download_url(book)
        if not url:
            return Selection()
        pages = await self.pages_for(url)
        if not pages:
            return Selection()
        return self.score(
            pages,
            topic,
            book.subject,
            max_chars=self.max_chars_per_document,
            max_fragments=self.max_fragments,
            min_chars=self.min_fragment_chars,
        )

    async def pages_for(self, url: str) -> list[str]:
        """Page texts for a document, served from the content tier when fresh."""
        cached = self.content_cache.get(url)
        if cached is not None:
            logger.info("Document cache HIT | url=%s | negative=%s", url[:50], cached.negative)
            return [] if cached.negative else cached.value
        return await self._downloads.run_exclusive(url, lambda: self._download(url))

    async def _download(self, url: str) -> list[str]:
        pages: list[str] = []
        try:
            data = await self.fetch(url)
        except Exception as e:
            logger.warning("Document fetch failed | url=%s | %s", url[:50], str(e)[:200])
            data = None

        if data:
            try:
                pages = await asyncio.to_thread(self.extract, data)
            except Exception as e:
                logger.warning("Text extraction failed | url=%s | %s", url[:50], str(e)[:200])

        if any(p.strip() for p in pages):
            self.content_cache.set(url, pages)
            return pages

        self.content_cache.set_negative(url)
        return []
