"""Deterministic cache keys for quiz requests.

A key is built from an ordered tuple of fields. Every field is trimmed,
missing fields count as the empty string, and the topic is case-folded.
"""

import hashlib
import json

KEY_PREFIX = "qz:"


def build_key(*fields: str | None, topic: str | None = None) -> str:
    """Generate an opaque key from ordered fields and an optional topic."""
    parts = [(f or "").strip() for f in fields]
    if topic is not None:
        parts.append(topic.strip().casefold())
    normalized = json.dumps(parts, ensure_ascii=False)
    return f"{KEY_PREFIX}{hashlib.sha256(normalized.encode()).hexdigest()[:32]}"


def quiz_key(request) -> str:
    """Output-tier key: language, course, book and topic."""
    return build_key(
        request.language,
        request.course_name,
        request.book_title,
        topic=request.topic or "",
    )


def context_key(request) -> str:
    """Derived-context key: course, book and topic (language independent)."""
    return build_key(request.course_name, request.book_title, topic=request.topic or "")
