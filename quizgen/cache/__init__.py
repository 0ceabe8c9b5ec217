"""Caching and deduplication primitives shared by every expensive step."""

from quizgen.cache.keys import build_key, context_key, quiz_key
from quizgen.cache.singleflight import SingleFlight
from quizgen.cache.store import CacheEntry, TTLStore

__all__ = [
    "CacheEntry",
    "SingleFlight",
    "TTLStore",
    "build_key",
    "context_key",
    "quiz_key",
]
