"""Relevance scoring of document pages against a quiz topic.

Pure and deterministic: pages are scored by topic-term hits (3 points each),
subject-hint hits (1 point each) and a small length prior, then taken best
first until the character or page budget runs out.
"""

import re
from dataclasses import dataclass, field

_TERM_SPLIT = re.compile(r"[^a-záéíóúñü0-9]+", re.IGNORECASE)

TOPIC_TERM_WEIGHT = 3
HINT_TERM_WEIGHT = 1
MAX_LENGTH_PRIOR = 2.0
LENGTH_PRIOR_CHARS = 5000


@dataclass(frozen=True)
class Selection:
    context: str = ""
    used_pages: list[int] = field(default_factory=list)


def _terms(text: str) -> list[str]:
    return [t for t in _TERM_SPLIT.split(text.lower()) if t]


def score_page(text: str, topic_terms: list[str], hint_terms: list[str]) -> float:
    low = text.lower()
    score = sum(TOPIC_TERM_WEIGHT for t in topic_terms if t in low)
    score += sum(HINT_TERM_WEIGHT for t in hint_terms if t in low)
    return score + min(MAX_LENGTH_PRIOR, len(text) / LENGTH_PRIOR_CHARS)


def select_relevant_context(
    pages: list[str],
    topic: str,
    hint: str = "",
    max_chars: int = 8000,
    max_fragments: int = 12,
    min_chars: int = 100,
) -> Selection:
    """Pick the most relevant pages, each prefixed with its page marker ``(p.N)``."""
    if not pages:
        return Selection()

    topic_terms = _terms(topic)
    hint_terms = _terms(hint) if hint else []

    ranked = sorted(
        enumerate(pages),
        key=lambda item: score_page(item[1], topic_terms, hint_terms),
        reverse=True,
    )

    chunks: list[str] = []
    used: list[int] = []
    total = 0
    for idx, text in ranked:
        if not text or len(text) < min_chars:
            continue
        chunks.append(f"(p.{idx + 1}) {text}")
        used.append(idx)
        total += len(text)
        if total >= max_chars or len(chunks) >= max_fragments:
            break

    return Selection(context="\n\n".join(chunks), used_pages=used)
