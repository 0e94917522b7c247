"""Anthropic Claude LLM provider."""

import time
from typing import Optional

import anthropic
from anthropic import AsyncAnthropic

from board_insights.agents.providers.base import DEFAULT_MAX_TOKENS, LLMProvider
from board_insights.config import InsightsConfig
from board_insights.errors import ApiError, ConfigurationError, NetworkError
from board_insights.logging import InsightsLogger


class AnthropicProvider(LLMProvider):
    """Stateless Messages API client: one request per call, no retries."""

    def __init__(
        self,
        api_key: str,
        config: Optional[InsightsConfig] = None,
        events: Optional[InsightsLogger] = None,
    ):
        if not api_key:
            raise ConfigurationError("Claude API key not configured")
        self.config = config or InsightsConfig()
        self.model = self.config.model
        self.events = events or InsightsLogger()
        self._client = AsyncAnthropic(
            api_key=api_key,
            base_url=self.config.base_url,
            timeout=self.config.request_timeout,
            max_retries=0,
        )

    @property
    def name(self) -> str:
        return "anthropic"

    async def complete(self, prompt: str, max_tokens: int = DEFAULT_MAX_TOKENS) -> str:
        """Send ``prompt`` as the single user message and return the first text segment."""
        if not prompt:
            raise ValueError("Prompt must be a non-empty string")
        if isinstance(max_tokens, bool) or not isinstance(max_tokens, int) or max_tokens <= 0:
            raise ValueError(f"max_tokens must be a positive integer, got {max_tokens!r}")

        self.events.llm_request(self.name, self.model, max_tokens, len(prompt))
        started = time.monotonic()
        try:
            response = await self._client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                messages=[
                    {"role": "user", "content": prompt},
                ],
            )
        except anthropic.APIStatusError as e:
            self.events.llm_failed(self.name, "ApiError", str(e), status_code=e.status_code)
            raise ApiError(f"Claude API error: {e.status_code}", status_code=e.status_code) from e
        except anthropic.APIConnectionError as e:
            self.events.llm_failed(self.name, "NetworkError", str(e))
            raise NetworkError(f"Claude API request failed: {e}") from e
        except anthropic.APIError as e:
            # e.g. APIResponseValidationError: a response arrived but was unusable
            status_code = getattr(getattr(e, "response", None), "status_code", None)
            if status_code is None:
                self.events.llm_failed(self.name, "NetworkError", str(e))
                raise NetworkError(f"Claude API request failed: {e}") from e
            self.events.llm_failed(self.name, "ApiError", str(e), status_code=status_code)
            raise ApiError(f"Claude API error: {e}", status_code=status_code) from e

        text = self._first_text(response)
        if text is None:
            self.events.llm_failed(self.name, "ApiError", "Reply contained no text content", status_code=200)
            raise ApiError("Claude API reply contained no text content", status_code=200)

        self.events.llm_response(self.name, len(text), time.monotonic() - started)
        return text

    async def aclose(self) -> None:
        await self._client.close()

    @staticmethod
    def _first_text(response) -> Optional[str]:
        for block in response.content or []:
            text = getattr(block, "text", None)
            if isinstance(text, str):
                return text
        return None
