"""Pydantic models for API input/output — shared across the quiz flow.

Split into: inputs, intermediate context, backend payload, and final result.
"""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# ═══════════════ FRONTEND REQUESTS ═══════════════

class QuizRequest(BaseModel):
    """Semantic quiz input. Accepts both camelCase (frontend) and snake_case names."""

    model_config = ConfigDict(frozen=True)

    topic: str = ""
    book_title: str = Field(default="", validation_alias=AliasChoices("bookTitle", "book_title"))
    course_name: str = Field(default="", validation_alias=AliasChoices("courseName", "course_name"))
    language: Literal["es", "en"] = "es"

    @field_validator("topic", "book_title", "course_name", mode="before")
    @classmethod
    def _strip(cls, v):
        # Catalog lookup and cache keys must see the same spelling
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    @property
    def is_spanish(self) -> bool:
        return self.language == "es"


class ExtractContentRequest(BaseModel):
    """Body of /api/extract-content."""

    book_title: str = Field(default="", validation_alias=AliasChoices("bookTitle", "book_title"))
    subject: str = ""
    course: str = ""
    topic: str = ""


# ═══════════════ CONTEXT ═══════════════

class ContextBundle(BaseModel):
    """Derived context for a request plus the titles it was drawn from."""

    model_config = ConfigDict(frozen=True)

    context: str = ""
    references: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.context


# ═══════════════ BACKEND PAYLOAD ═══════════════

class QuizQuestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question_text: str = Field(alias="questionText", min_length=1)
    expected_answer: str = Field(default="", alias="expectedAnswer")

    @field_validator("question_text")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("question text is blank")
        return v


class QuizPayload(BaseModel):
    """Structured output expected from the generation backend."""

    model_config = ConfigDict(populate_by_name=True)

    quiz_title: str = Field(alias="quizTitle", min_length=1)
    questions: list[QuizQuestion] = Field(min_length=1)


# ═══════════════ FINAL RESULT ═══════════════

class QuizResult(BaseModel):
    """Rendered quiz document with provenance."""

    model_config = ConfigDict(frozen=True)

    quiz: str
    references: list[str] = Field(default_factory=list)
    is_fallback: bool = False
    is_demo: bool = False

    def to_response(self) -> dict:
        """Frontend-facing shape (camelCase flags)."""
        return {
            "quiz": self.quiz,
            "references": list(self.references),
            "isFallback": self.is_fallback,
            "isDemo": self.is_demo,
        }
