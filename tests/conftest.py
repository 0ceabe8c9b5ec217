"""Shared test fixtures and configuration."""

import os

import pytest

# Ensure we're in demo mode during tests (no real API keys)
os.environ.setdefault("ANTHROPIC_API_KEY", "")

from quizgen.cache import TTLStore  # noqa: E402
from quizgen.context.assembler import ContextAssembler  # noqa: E402
from quizgen.orchestrator.schemas import QuizRequest  # noqa: E402
from quizgen.utils.books_data import BookEntry  # noqa: E402


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def quiz_request():
    return QuizRequest(language="es", course_name="5A", book_title="Ciencias", topic="Fotosíntesis")


@pytest.fixture
def sample_pages():
    """Page texts as extracted from a science textbook."""
    filler = " Las actividades del capítulo refuerzan los contenidos con ejercicios prácticos."
    return [
        "Índice general del libro." + filler,
        "La célula es la unidad básica de la vida. Membrana, citoplasma y núcleo." + filler * 2,
        "La fotosíntesis ocurre en los cloroplastos. La clorofila captura la luz solar"
        " y produce glucosa y oxígeno a partir de agua y dióxido de carbono." + filler * 2,
        "corto",
        "El sistema respiratorio permite el intercambio de gases en los alvéolos." + filler * 2,
    ]


@pytest.fixture
def sample_books():
    return [
        BookEntry(title="Ciencias Naturales 5° Básico", course="5A", subject="Ciencias", drive_id="drive-cn5"),
        BookEntry(title="Guía de Ciencias 5° Básico", course="5A", subject="Ciencias",
                  pdf_url="https://example.org/guia-ciencias.pdf"),
        BookEntry(title="Matemática 5° Básico", course="5A", subject="Matemáticas", drive_id="drive-mat5"),
        BookEntry(title="Ciencias Naturales 6° Básico", course="6A", subject="Ciencias", drive_id="drive-cn6"),
    ]


@pytest.fixture
def make_assembler(clock, sample_books, sample_pages):
    """Factory for assemblers wired to in-memory stores and a scripted fetcher."""

    def _make(fetch=None, extract=None, **kwargs):
        async def default_fetch(url):
            return b"%PDF-fake"

        content_cache = TTLStore("content", positive_ttl=1800, negative_ttl=300, max_entries=6, timer=clock)
        context_cache = TTLStore("context", positive_ttl=900, negative_ttl=120, max_entries=20, timer=clock)
        return ContextAssembler(
            fetch=fetch or default_fetch,
            content_cache=content_cache,
            context_cache=context_cache,
            extract=extract or (lambda data: list(sample_pages)),
            books=sample_books,
            **kwargs,
        )

    return _make
