"""LiteLLM adapter implementing LLMPort using LiteLLM for provider-agnostic LLM calls."""

import logging

import litellm
from litellm import acompletion, completion_cost

from port.llm import LLMAuthError, LLMError, LLMRateLimitError, LLMTimeoutError

# Suppress LiteLLM's verbose logging (proxy server warnings, etc.)
litellm.suppress_debug_info = True
logging.getLogger("LiteLLM").setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)


class LiteLLMAdapter:
    """Adapter that implements LLMPort on top of litellm.acompletion()."""

    async def complete(
        self,
        messages: list[dict[str, str]],
        model: str = "openai/gpt-4.1-mini",
        timeout: float = 30.0,
        **kwargs,
    ) -> str:
        """Send a chat completion and return the response text.

        Token usage and estimated cost are logged, not returned.

        Raises:
            ValueError: If messages list is empty.
            LLMTimeoutError, LLMAuthError, LLMRateLimitError, LLMError:
                Mapped from the corresponding litellm exceptions. Connection,
                bad request and server errors all become LLMError.
        """
        if not messages:
            raise ValueError("messages list cannot be empty")

        try:
            response = await acompletion(
                model=model,
                messages=messages,
                timeout=timeout,
                **kwargs,
            )
        except litellm.Timeout as e:
            raise LLMTimeoutError(str(e)) from e
        except litellm.AuthenticationError as e:
            raise LLMAuthError(str(e)) from e
        except litellm.RateLimitError as e:
            raise LLMRateLimitError(str(e)) from e
        except (
            litellm.APIError,
            litellm.APIConnectionError,
            litellm.BadRequestError,
            litellm.NotFoundError,
            litellm.ServiceUnavailableError,
            litellm.InternalServerError,
        ) as e:
            # Not all of these subclass litellm.APIError
            raise LLMError(str(e)) from e

        content = ""
        if response.choices:
            message = response.choices[0].message
            if message and message.content:
                content = message.content.strip()

        if not content:
            logger.error("No content in LLM response", extra={
                "model": model,
                "response_id": getattr(response, "id", None),
            })
            raise LLMError("No content returned from LLM")

        usage = response.usage
        try:
            estimated_cost = completion_cost(completion_response=response)
        except Exception as e:
            logger.debug("Could not calculate cost with LiteLLM", extra={
                "model": model, "error": str(e),
            })
            estimated_cost = 0.0

        logger.info("LLM call completed", extra={
            "model": model,
            "prompt_tokens": usage.prompt_tokens if usage else 0,
            "completion_tokens": usage.completion_tokens if usage else 0,
            "estimated_cost": estimated_cost,
        })
        return content
