"""Local quiz synthesis used when the generation backend is unavailable.

Deterministic and free of external calls: the same request always yields
the same document.
"""

from html import escape

from quizgen.orchestrator.render import capitalize_first, default_title, render_quiz_html
from quizgen.orchestrator.schemas import ContextBundle, QuizQuestion, QuizRequest, QuizResult
from quizgen.utils.question_banks import GENERIC_EN, GENERIC_ES, find_topic_bank

FALLBACK_QUESTION_COUNT = 15


def fallback_questions(request: QuizRequest, count: int = FALLBACK_QUESTION_COUNT) -> list[QuizQuestion]:
    """Pick topic-specific questions when a bank matches, otherwise fill the generic templates."""
    es = request.is_spanish
    topic = request.topic.strip() or ("el tema" if es else "the topic")

    bank = find_topic_bank(topic) if es else None
    if bank is None:
        templates = GENERIC_ES if es else GENERIC_EN
        bank = [
            (q.format(topic=topic), a.format(topic=topic, Topic=capitalize_first(topic)))
            for q, a in templates
        ]

    return [QuizQuestion(question_text=q, expected_answer=a) for q, a in bank[:count]]


def build_fallback_quiz(request: QuizRequest, context: ContextBundle | None = None) -> QuizResult:
    """Synthesize a complete quiz document from the static question banks."""
    html = render_quiz_html(request, default_title(request), fallback_questions(request))
    return QuizResult(quiz=html, is_fallback=True)


def emergency_quiz(request: QuizRequest) -> QuizResult:
    """Minimal well-formed document for when even the fallback builder fails."""
    return QuizResult(quiz=f"<h2>{escape(default_title(request))}</h2>", is_fallback=True)
