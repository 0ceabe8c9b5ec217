"""Service wiring — builds the cache tiers and collaborators once per process."""

from quizgen.cache import SingleFlight, TTLStore
from quizgen.config import Settings
from quizgen.context.assembler import ContextAssembler
from quizgen.integrations.drive import DriveDocumentFetcher
from quizgen.orchestrator.demo_data import demo_payload
from quizgen.orchestrator.generator import QuizOrchestrator
from quizgen.services.quiz_generator import QuizGenerator


def build_orchestrator(settings: Settings) -> QuizOrchestrator:
    """Construct the three cache tiers, the context assembler and the orchestrator."""
    content_cache = TTLStore(
        "content",
        positive_ttl=settings.content_cache_ttl,
        negative_ttl=settings.content_failure_ttl,
        max_entries=settings.content_cache_max_entries,
    )
    context_cache = TTLStore(
        "context",
        positive_ttl=settings.context_cache_ttl,
        negative_ttl=settings.context_failure_ttl,
        max_entries=settings.context_cache_max_entries,
    )
    output_cache = TTLStore(
        "quiz",
        positive_ttl=settings.quiz_cache_ttl,
        negative_ttl=settings.quiz_failure_ttl,
        max_entries=settings.quiz_cache_max_entries,
    )

    fetcher = DriveDocumentFetcher(timeout=settings.document_fetch_timeout)
    assembler = ContextAssembler(
        fetch=fetcher.fetch,
        content_cache=content_cache,
        context_cache=context_cache,
        max_chars_per_document=settings.context_max_chars_per_document,
        max_total_chars=settings.context_max_total_chars,
        max_fragments=settings.context_max_fragments,
        min_fragment_chars=settings.context_min_fragment_chars,
    )

    if settings.is_demo_mode:
        primary = demo_payload
    else:
        primary = QuizGenerator(question_count=settings.quiz_question_count).generate

    return QuizOrchestrator(
        assembler=assembler,
        primary=primary,
        output_cache=output_cache,
        singleflight=SingleFlight("quiz"),
        demo=settings.is_demo_mode,
    )
