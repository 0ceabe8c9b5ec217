"""Demo/mock payload returned when no API key is configured."""

from quizgen.config import settings
from quizgen.orchestrator.render import capitalize_first, default_title
from quizgen.orchestrator.schemas import ContextBundle, QuizRequest


async def demo_payload(request: QuizRequest, context: ContextBundle) -> dict:
    """Backend-shaped payload built from three template questions cycled to the configured count."""
    topic = request.topic.strip()
    if request.is_spanish:
        base = [
            (f"¿Cuál es el concepto más importante de {topic}?",
             f"El concepto más importante es la comprensión fundamental de los principios básicos que rigen {topic}."),
            (f"¿Cómo se relaciona {topic} con otros temas del curso?",
             f"{capitalize_first(topic)} se conecta con múltiples áreas del conocimiento a través de sus aplicaciones prácticas."),
            (f"¿Cuáles son las aplicaciones prácticas de {topic}?",
             "Las aplicaciones incluyen resolver problemas cotidianos y comprender fenómenos naturales."),
        ]
    else:
        base = [
            (f"What is the most important concept of {topic}?",
             f"The most important concept is the fundamental understanding of the basic principles that govern {topic}."),
            (f"How does {topic} relate to other course topics?",
             f"{capitalize_first(topic)} connects with multiple knowledge areas through its practical applications."),
            (f"What are the practical applications of {topic}?",
             "Applications include solving everyday problems and understanding natural phenomena."),
        ]

    questions = [
        {"questionText": q, "expectedAnswer": a}
        for q, a in (base[i % len(base)] for i in range(settings.quiz_question_count))
    ]
    return {"quizTitle": default_title(request), "questions": questions}
