"""Orchestrator — the single entry point for quiz generation.

Responsibilities:
  - Serve fresh results from the output cache
  - Coalesce identical concurrent requests into one computation
  - Assemble book context (cached separately)
  - Call the generation backend and validate its payload
  - Fall back to locally synthesized quizzes on any failure, without caching them

``generate`` never raises.
"""

import logging
from typing import Awaitable, Callable

from pydantic import ValidationError

from quizgen.cache import SingleFlight, TTLStore, quiz_key
from quizgen.context.assembler import ContextAssembler
from quizgen.orchestrator.fallback import build_fallback_quiz, emergency_quiz
from quizgen.orchestrator.render import render_quiz_html
from quizgen.orchestrator.schemas import ContextBundle, QuizPayload, QuizRequest, QuizResult
from quizgen.services.llm_client import is_rate_limit_error

logger = logging.getLogger(__name__)

Primary = Callable[[QuizRequest, ContextBundle], Awaitable[dict | QuizPayload]]
Fallback = Callable[[QuizRequest, ContextBundle], QuizResult]


class InvalidPayloadError(ValueError):
    """The backend answered, but not with a usable quiz."""


class QuizOrchestrator:
    """Caches, deduplicates and guards calls to the generation backend."""

    def __init__(
        self,
        assembler: ContextAssembler,
        primary: Primary,
        output_cache: TTLStore[QuizResult],
        fallback: Fallback = build_fallback_quiz,
        singleflight: SingleFlight[QuizResult] | None = None,
        demo: bool = False,
    ):
        self.assembler = assembler
        self.primary = primary
        self.output_cache = output_cache
        self.fallback = fallback
        self.singleflight = singleflight if singleflight is not None else SingleFlight("quiz")
        self.demo = demo

    async def generate(self, request: QuizRequest) -> QuizResult:
        try:
            key = quiz_key(request)
            cached = self.output_cache.get(key)
            if cached is not None and not cached.negative:
                logger.info("Quiz cache HIT | topic=%s", request.topic[:80])
                return cached.value

            return await self.singleflight.run_exclusive(key, lambda: self._work(request, key))
        except Exception as e:
            logger.error("Quiz generation crashed, using fallback | topic=%s | %s", request.topic[:80], str(e)[:300])
            return self._safe_fallback(request, ContextBundle())

    async def _work(self, request: QuizRequest, key: str) -> QuizResult:
        context = await self.assembler.assemble(request)

        try:
            payload = await self.primary(request, context)
            result = self._to_result(request, payload, context)
        except Exception as e:
            rate_limited = is_rate_limit_error(e)
            logger.warning(
                "Quiz generation failed%s, using fallback | topic=%s | %s: %s",
                " (rate limited)" if rate_limited else "",
                request.topic[:80], type(e).__name__, str(e)[:200],
            )
            return self._safe_fallback(request, context)

        self.output_cache.set(key, result)
        logger.info("Quiz generated and cached | topic=%s", request.topic[:80])
        return result

    def _to_result(self, request: QuizRequest, payload, context: ContextBundle) -> QuizResult:
        """Validate the backend payload and render it; raises InvalidPayloadError."""
        if not payload:
            raise InvalidPayloadError("empty payload")
        try:
            quiz = QuizPayload.model_validate(payload)
        except ValidationError as e:
            raise InvalidPayloadError(f"malformed payload: {e.error_count()} errors") from e

        html = render_quiz_html(request, quiz.quiz_title, quiz.questions, context.references)
        return QuizResult(quiz=html, references=list(context.references), is_demo=self.demo)

    def _safe_fallback(self, request: QuizRequest, context: ContextBundle) -> QuizResult:
        try:
            return self.fallback(request, context)
        except Exception as e:
            logger.error("Fallback builder failed | topic=%s | %s", request.topic[:80], str(e)[:200])
            return emergency_quiz(request)
