"""Async Anthropic API wrapper with retry, logging, JSON extraction and error classification."""

import asyncio
import json
import logging
import re
import time
from pathlib import Path

import anthropic
import httpx

from quizgen.config import settings

logger = logging.getLogger(__name__)

# Singleton client, initialized lazily
_client: anthropic.AsyncAnthropic | None = None

RETRYABLE_STATUSES = (429, 500, 502, 503, 529)

_RATE_LIMIT_PATTERN = re.compile(r"\b429\b|too many requests|rate\s*limit|quota", re.IGNORECASE)


def _get_client() -> anthropic.AsyncAnthropic:
    global _client
    if _client is None:
        _client = anthropic.AsyncAnthropic(
            api_key=settings.anthropic_api_key,
            timeout=httpx.Timeout(settings.llm_timeout_seconds, connect=10.0),
        )
    return _client


def load_prompt(name: str) -> str:
    """Load a prompt template from quizgen/prompts/{name}.txt."""
    prompt_path = Path(__file__).parent.parent / "prompts" / f"{name}.txt"
    return prompt_path.read_text(encoding="utf-8")


def is_rate_limit_error(err: BaseException) -> bool:
    """True when a backend failure looks like throttling (HTTP 429, rate limit, quota)."""
    if isinstance(err, anthropic.RateLimitError):
        return True
    if getattr(err, "status_code", None) == 429:
        return True
    return bool(_RATE_LIMIT_PATTERN.search(str(err)))




def _is_retryable(err: Exception) -> bool:
    if isinstance(err, anthropic.APIStatusError):
        return err.status_code in RETRYABLE_STATUSES
    return isinstance(err, anthropic.APIConnectionError)


async def call_model(
    system: str,
    user_message: str,
    max_tokens: int | None = None,
    model: str | None = None,
) -> str:
    """Send one user message to the configured model and return its text.

    Throttling, overload and connection errors are retried up to
    ``llm_max_retries`` times. The hard timeout is never retried.
    """
    client = _get_client()
    model = model or settings.claude_model
    max_attempts = settings.llm_max_retries + 1

    for attempt in range(1, max_attempts + 1):
        start = time.monotonic()
        try:
            response = await asyncio.wait_for(
                client.messages.create(
                    model=model,
                    max_tokens=max_tokens or settings.llm_max_tokens,
                    system=system,
                    messages=[{"role": "user", "content": user_message}],
                ),
                timeout=settings.llm_timeout_seconds,
            )
        except asyncio.TimeoutError:
            elapsed_ms = int((time.monotonic() - start) * 1000)
            logger.warning("LLM timeout | model=%s | %dms", model, elapsed_ms)
            raise TimeoutError(f"LLM timeout after {elapsed_ms}ms")
        except (anthropic.APIStatusError, anthropic.APIConnectionError) as e:
            logger.warning(
                "LLM error | model=%s | status=%s | attempt=%d/%d | %dms | %s",
                model, getattr(e, "status_code", "-"), attempt, max_attempts,
                int((time.monotonic() - start) * 1000), str(e)[:200],
            )
            if attempt < max_attempts and _is_retryable(e):
                continue
            raise

        usage = response.usage
        logger.info(
            "LLM OK | model=%s | tokens_in=%d tokens_out=%d | %dms",
            model, usage.input_tokens, usage.output_tokens, int((time.monotonic() - start) * 1000),
        )
        return response.content[0].text if response.content else ""

    raise RuntimeError("LLM call failed after all retries")


async def call_model_json(
    system: str,
    user_message: str,
    max_tokens: int | None = None,
) -> dict | None:
    """Call the configured model and parse the first JSON object in its reply."""
    text = await call_model(system, user_message, max_tokens)
    return extract_json(text)


_decoder = json.JSONDecoder()


def extract_json(text: str) -> dict | None:
    """Return the first JSON object embedded in ``text``.

    Code fences and chatty preambles are skipped by decoding from each ``{``
    in turn until one parses.
    """
    pos = text.find("{")
    while pos != -1:
        try:
            obj, _ = _decoder.raw_decode(text, pos)
            return obj
        except json.JSONDecodeError:
            pos = text.find("{", pos + 1)
    return None
