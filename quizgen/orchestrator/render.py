"""HTML rendering for quiz documents (shared by real and fallback quizzes)."""

from html import escape

from quizgen.orchestrator.schemas import QuizQuestion, QuizRequest

_SEPARATOR = '<hr style="margin-top: 1rem; margin-bottom: 1.5rem; border-top: 1px solid #e5e7eb;" />'


def title_prefix(request: QuizRequest) -> str:
    return "CUESTIONARIO" if request.is_spanish else "QUIZ"


def default_title(request: QuizRequest) -> str:
    return f"{title_prefix(request)} - {request.topic.strip().upper()}"


def capitalize_first(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:]


def render_quiz_html(
    request: QuizRequest,
    title: str,
    questions: list[QuizQuestion],
    references: list[str] | None = None,
) -> str:
    """Format a title and question list as the HTML document the frontend prints."""
    es = request.is_spanish
    answer_label = "Respuesta esperada" if es else "Expected answer"

    parts = [
        f"<h2>{escape(title)}</h2>",
        f"<p><strong>{'Libro:' if es else 'Book:'}</strong> {escape(request.book_title)}</p>",
        f"<p><strong>{'Curso:' if es else 'Course:'}</strong> {escape(request.course_name)}</p>",
        "<br /><br />",
    ]

    for index, q in enumerate(questions):
        answer = capitalize_first(escape(q.expected_answer)).replace("\n", "<br />")
        parts.append(f'<p style="margin-bottom: 1em;"><strong>{index + 1}. {escape(q.question_text)}</strong></p>')
        parts.append(f'<p style="margin-top: 0.5em; margin-bottom: 0.5em;"><strong>{answer_label}:</strong></p>')
        parts.append(f'<p style="margin-top: 0.25em; margin-bottom: 2em; text-align: justify;">{answer}</p>')
        if index < len(questions) - 1:
            parts.append(_SEPARATOR)

    if references:
        refs_title = "Referencias (PDF)" if es else "References (PDF)"
        parts.append(_SEPARATOR)
        parts.append(f"<p><strong>{refs_title}:</strong> {escape('; '.join(references))}</p>")

    return "".join(parts)
