"""LLM providers for board insights."""

from board_insights.agents.providers.base import LLMProvider
from board_insights.agents.providers.anthropic_provider import AnthropicProvider

__all__ = ["LLMProvider", "AnthropicProvider"]
