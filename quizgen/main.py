"""Quizgen — FastAPI application entry point.

Provides /api/generate-quiz and /api/extract-content for the course frontend.
"""

import logging
import time
from collections import defaultdict
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from quizgen.config import settings
from quizgen.orchestrator.factory import build_orchestrator
from quizgen.orchestrator.generator import QuizOrchestrator
from quizgen.orchestrator.schemas import ExtractContentRequest, QuizRequest
from quizgen.utils.books_data import resolve_book

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger("quizgen")


# ═══════════════ RATE LIMITER ═══════════════

class RateLimiter:
    """Fixed-window rate limiter by IP."""

    def __init__(self, max_requests: int, window_seconds: int = 60, timer=time.monotonic):
        self.max_requests = max_requests
        self.window = window_seconds
        self._timer = timer
        self._hits: dict[str, list[float]] = defaultdict(list)
        self._last_sweep = timer()

    def is_limited(self, ip: str) -> bool:
        now = self._timer()
        window_start = now - self.window
        if now - self._last_sweep > self.window:
            self._sweep(window_start)
            self._last_sweep = now

        self._hits[ip] = [t for t in self._hits[ip] if t > window_start]
        if len(self._hits[ip]) >= self.max_requests:
            return True
        self._hits[ip].append(now)
        return False

    def _sweep(self, window_start: float):
        """Forget clients with no hits inside the current window."""
        idle = [ip for ip, hits in self._hits.items() if not hits or hits[-1] <= window_start]
        for ip in idle:
            del self._hits[ip]

    def tracked_clients(self) -> int:
        return len(self._hits)


rate_limiter = RateLimiter(settings.rate_limit_per_minute)


# ═══════════════ LIFESPAN ═══════════════

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Quizgen starting | demo_mode=%s", settings.is_demo_mode)
    app.state.orchestrator = build_orchestrator(settings)

    yield

    app.state.orchestrator = None
    logger.info("Quizgen shutting down")


# ═══════════════ APP ═══════════════

app = FastAPI(
    title="Quizgen API",
    description="Course quiz generation grounded in textbook content",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["POST", "OPTIONS", "GET"],
    allow_headers=["Content-Type"],
)


def _orchestrator(request: Request) -> QuizOrchestrator:
    return request.app.state.orchestrator


def _client_ip(request: Request) -> str:
    client_ip = request.headers.get("x-forwarded-for", "").split(",")[0].strip()
    if not client_ip:
        client_ip = request.client.host if request.client else "unknown"
    return client_ip


async def _read_json(request: Request) -> dict | None:
    try:
        body = await request.json()
    except Exception:
        return None
    return body if isinstance(body, dict) else None


# ═══════════════ ENDPOINTS ═══════════════

@app.get("/health")
async def health(request: Request):
    orchestrator = _orchestrator(request)
    assembler = orchestrator.assembler
    return {
        "status": "ok",
        "demo_mode": settings.is_demo_mode,
        "has_anthropic": settings.has_anthropic_key,
        "cache": {
            "content": assembler.content_cache.size(),
            "context": assembler.context_cache.size(),
            "quiz": orchestrator.output_cache.size(),
            "in_flight": len(orchestrator.singleflight),
        },
    }


@app.post("/api/generate-quiz")
async def generate_quiz(request: Request):
    """Generate (or serve from cache) a quiz for a course book topic."""
    client_ip = _client_ip(request)
    if rate_limiter.is_limited(client_ip):
        return JSONResponse(
            status_code=429,
            content={"error": "Demasiadas solicitudes. Por favor espera un minuto."},
        )

    body = await _read_json(request)
    if body is None:
        return JSONResponse(status_code=400, content={"error": "Formato de solicitud inválido."})

    try:
        quiz_request = QuizRequest.model_validate(body)
    except ValidationError as e:
        return JSONResponse(
            status_code=400,
            content={"error": "Solicitud inválida.", "details": e.errors(include_url=False, include_context=False)},
        )
    if not quiz_request.topic.strip():
        return JSONResponse(status_code=400, content={"error": "El tema es obligatorio."})

    start = time.monotonic()
    result = await _orchestrator(request).generate(quiz_request)
    elapsed_ms = int((time.monotonic() - start) * 1000)
    logger.info(
        "Quiz served | topic=%s | fallback=%s | %dms | ip=%s",
        quiz_request.topic[:80], result.is_fallback, elapsed_ms, client_ip,
    )

    response_data = result.to_response()
    response_data["_pipeline"] = {"ms": elapsed_ms}
    return JSONResponse(content=response_data)


@app.post("/api/extract-content")
async def extract_content(request: Request):
    """Resolve a catalog book and return the context selected for a topic."""
    body = await _read_json(request)
    if body is None:
        return JSONResponse(status_code=400, content={"error": "Formato de solicitud inválido."})

    try:
        inp = ExtractContentRequest.model_validate(body)
    except ValidationError:
        return JSONResponse(status_code=400, content={"error": "Solicitud inválida."})

    if not inp.book_title and not (inp.subject and inp.course):
        return JSONResponse(
            status_code=400,
            content={"error": "bookTitle or (subject + course) is required"},
        )

    book, matched_by = resolve_book(inp.book_title, inp.subject, inp.course)
    if book is None:
        return JSONResponse(
            status_code=404,
            content={
                "error": "Book not found",
                "details": {"bookTitle": inp.book_title, "subject": inp.subject, "course": inp.course},
            },
        )

    bundle = await _orchestrator(request).assembler.collect([book], inp.topic or book.subject)
    return JSONResponse(content={
        "success": True,
        "bookTitle": book.title,
        "course": book.course,
        "subject": book.subject,
        "content": bundle.context,
        "references": bundle.references,
        "matchedBy": matched_by,
        "topicRequested": inp.topic,
    })
