"""Abstract base class for LLM providers."""

from abc import ABC, abstractmethod

DEFAULT_MAX_TOKENS = 1000


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    async def complete(self, prompt: str, max_tokens: int = DEFAULT_MAX_TOKENS) -> str:
        """
        Send one user prompt and return the reply text.

        Args:
            prompt: Complete, self-contained instruction string
            max_tokens: Token budget for the reply

        Returns:
            Text of the first content segment of the reply

        Raises:
            ApiError: non-success HTTP status
            NetworkError: transport failure
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging (e.g., 'anthropic')."""
        pass

    async def aclose(self) -> None:
        """Release any connections held by the provider."""
        pass
