"""LLM port — outbound interface for large language model calls."""

from typing import Protocol


class LLMError(Exception):
    """Base exception for LLM port errors."""


class LLMTimeoutError(LLMError):
    """LLM request timed out."""


class LLMRateLimitError(LLMError):
    """LLM provider rate limit exceeded."""


class LLMAuthError(LLMError):
    """LLM provider authentication failed."""


class LLMPort(Protocol):
    """Port for chat-completion calls. Returns the stripped response text."""

    async def complete(
        self,
        messages: list[dict[str, str]],
        model: str = "openai/gpt-4.1-mini",
        timeout: float = 30.0,
        **kwargs,
    ) -> str: ...
