"""Primary quiz generation — asks the model for a structured quiz grounded in book context."""

import logging

from quizgen.config import settings
from quizgen.orchestrator.render import default_title
from quizgen.orchestrator.schemas import ContextBundle, QuizRequest
from quizgen.services.llm_client import call_model_json, load_prompt

logger = logging.getLogger(__name__)

LANGUAGE_NAMES = {"es": "Spanish", "en": "English"}


class QuizGenerator:
    """Calls the AI backend. Raises on transport errors or unparseable output."""

    def __init__(self, question_count: int | None = None):
        self.question_count = question_count or settings.quiz_question_count

    async def generate(self, request: QuizRequest, context: ContextBundle) -> dict:
        system_prompt = load_prompt("quiz_generator")
        user_message = self._build_message(request, context)

        logger.info(
            "Quiz generation | topic=%s | book=%s | context_chars=%d",
            request.topic[:80], request.book_title[:80], len(context.context),
        )
        payload = await call_model_json(system_prompt, user_message)
        if payload is None:
            raise ValueError("model response contained no JSON object")
        return payload

    def _build_message(self, request: QuizRequest, context: ContextBundle) -> str:
        return (
            f"Language: {LANGUAGE_NAMES[request.language]}\n"
            f"Book: {request.book_title}\n"
            f"Course: {request.course_name}\n"
            f"Topic: {request.topic}\n"
            f"Title: {default_title(request)}\n"
            f"Number of questions: {self.question_count}\n\n"
            f'BOOK CONTEXT:\n"""\n{context.context}\n"""'
        )
