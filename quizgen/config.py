"""Application configuration loaded from environment variables."""

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration — reads from environment / .env file."""

    # Anthropic
    anthropic_api_key: str = ""
    claude_model: str = "claude-sonnet-4-6"

    # LLM defaults
    llm_max_retries: int = 1
    llm_timeout_seconds: int = 60
    llm_max_tokens: int = 6000

    # Raw document content (seconds)
    content_cache_ttl: float = 1800          # 30 min
    content_failure_ttl: float = 300         # 5 min
    content_cache_max_entries: int = 6

    # Derived context per course/book/topic
    context_cache_ttl: float = 900           # 15 min
    context_failure_ttl: float = 120         # 2 min
    context_cache_max_entries: int = 20

    # Final quiz output
    quiz_cache_ttl: float = 600              # 10 min
    quiz_failure_ttl: float = 60            # bound only; fallbacks are never cached
    quiz_cache_max_entries: int = 100

    # Context budgets
    context_max_chars_per_document: int = 6000
    context_max_total_chars: int = 14000
    context_max_fragments: int = 12
    context_min_fragment_chars: int = 100

    # Document fetch
    document_fetch_timeout: int = 30

    # Quiz shape
    quiz_question_count: int = 15

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: str = "*"
    rate_limit_per_minute: int = 20

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @model_validator(mode="after")
    def _failure_ttls_are_shorter(self) -> "Settings":
        tiers = {
            "content": (self.content_cache_ttl, self.content_failure_ttl),
            "context": (self.context_cache_ttl, self.context_failure_ttl),
            "quiz": (self.quiz_cache_ttl, self.quiz_failure_ttl),
        }
        for name, (ttl, failure_ttl) in tiers.items():
            if failure_ttl >= ttl:
                raise ValueError(
                    f"{name}_failure_ttl ({failure_ttl}) must be shorter than {name}_cache_ttl ({ttl})"
                )
        return self

    @property
    def has_anthropic_key(self) -> bool:
        return bool(self.anthropic_api_key)

    @property
    def is_demo_mode(self) -> bool:
        return not self.has_anthropic_key

    @property
    def cors_origins(self) -> list[str]:
        if self.allowed_origins == "*":
            return ["*"]
        return [o.strip() for o in self.allowed_origins.split(",")]


settings = Settings()
