"""In-memory implementation of LLMPort for testing."""


class FakeLLMAdapter:
    """Fake LLM adapter that returns a preconfigured response or raises."""

    def __init__(self, response: str = "{}", error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def complete(
        self,
        messages: list[dict[str, str]],
        model: str = "openai/gpt-4.1-mini",
        timeout: float = 30.0,
        **kwargs,
    ) -> str:
        self.calls.append({
            "messages": messages,
            "model": model,
            "timeout": timeout,
            **kwargs,
        })
        if self.error is not None:
            raise self.error
        return self.response
