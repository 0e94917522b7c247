"""Insights Agent - runs the user-triggered insight actions."""

import logging
from typing import Callable, Optional
from urllib.parse import quote

from board_insights.agents.insight_types import ActionOutcome, BoardAnalysis, OutcomeKind
from board_insights.agents.parser import parse_breakdown, parse_freeform
from board_insights.agents.prompts import (
    build_board_health_prompt,
    build_breakdown_prompt,
    build_card_suggestions_prompt,
)
from board_insights.agents.providers.anthropic_provider import AnthropicProvider
from board_insights.agents.providers.base import LLMProvider
from board_insights.board.aggregator import summarize_board
from board_insights.board.board_types import Board, BoardList, Card
from board_insights.config import SECRET_KEY, SECRET_SCOPE, SECRET_VISIBILITY, InsightsConfig
from board_insights.errors import ConfigurationError, InsightsError
from board_insights.host.base import HostContext, PopupItem
from board_insights.logging import InsightsLogger

logger = logging.getLogger(__name__)

SETTINGS_URL = "./settings.html"
BREAKDOWN_RESULT_URL = "./breakdown-result.html"
BREAKDOWN_FAILED_MESSAGE = "Failed to break down task. Check your Claude API key."

ProviderFactory = Callable[[str], LLMProvider]


async def _close_popup(t: HostContext):
    return await t.close_popup()


class InsightsAgent:
    """
    Runs insight actions against a host.

    Flow per action:
    1. Read the API key from the host secret store (never cached)
    2. Read card or board state and build the prompt
    3. Make exactly one model call through a provider built for that key
    4. Interpret the reply and hand it to the host's popup/notice sinks
    """

    def __init__(
        self,
        config: Optional[InsightsConfig] = None,
        provider_factory: Optional[ProviderFactory] = None,
        events: Optional[InsightsLogger] = None,
    ):
        self.config = config or InsightsConfig()
        self.events = events or InsightsLogger()
        self.provider_factory = provider_factory or self._default_provider

    def _default_provider(self, api_key: str) -> LLMProvider:
        return AnthropicProvider(api_key=api_key, config=self.config, events=self.events)

    async def _read_api_key(self, host: HostContext) -> Optional[str]:
        return await host.get_secret(SECRET_SCOPE, SECRET_VISIBILITY, SECRET_KEY) or None

    async def _complete(self, api_key: str, prompt: str, max_tokens: int) -> str:
        """Make the single model call for an action and release the provider afterwards."""
        provider = self.provider_factory(api_key)
        try:
            return await provider.complete(prompt, max_tokens)
        finally:
            await provider.aclose()

    async def _breakdown_failed(self, host: HostContext, error: Exception) -> ActionOutcome:
        logger.error(f"Task breakdown failed: {error}")
        self.events.action_failed("break_down_task", type(error).__name__, str(error))
        shown = await host.notice(BREAKDOWN_FAILED_MESSAGE, "error")
        return ActionOutcome(OutcomeKind.FAILED, message=BREAKDOWN_FAILED_MESSAGE, host_result=shown)

    async def break_down_task(self, host: HostContext) -> ActionOutcome:
        """Break the host's current card into subtasks and show them in a popup."""
        try:
            card = Card.from_dict(await host.card("all"))
            api_key = await self._read_api_key(host)

            if not api_key:
                self.events.configuration_missing("break_down_task")
                shown = await host.popup(title="Setup Required", url=SETTINGS_URL)
                return ActionOutcome(OutcomeKind.CONFIGURE, host_result=shown)

            reply = await self._complete(
                api_key, build_breakdown_prompt(card), self.config.breakdown_max_tokens
            )
            result = parse_breakdown(reply, events=self.events)

            if result.is_structured:
                shown = await host.popup(
                    title="Task Breakdown Complete",
                    items=[PopupItem(text=s.label, callback=_close_popup) for s in result.subtasks],
                )
                return ActionOutcome(OutcomeKind.SUBTASKS, subtasks=result.subtasks, host_result=shown)

            shown = await host.popup(
                title="Task Breakdown",
                url=f"{BREAKDOWN_RESULT_URL}?result={quote(result.raw_text, safe='')}",
            )
            return ActionOutcome(OutcomeKind.RAW_TEXT, text=result.raw_text, host_result=shown)

        except InsightsError as e:
            return await self._breakdown_failed(host, e)
        except Exception as e:
            # host read failures end in the same notice
            return await self._breakdown_failed(host, e)

    async def analyze_board_health(self, host: HostContext) -> BoardAnalysis:
        """
        Summarize the board and ask the model for a health assessment.

        Raises:
            ConfigurationError: no API key is stored
            ApiError, NetworkError: the model call failed
        """
        try:
            api_key = await self._read_api_key(host)
            if not api_key:
                self.events.configuration_missing("analyze_board_health")
                raise ConfigurationError("Claude API key not configured")

            board = Board.from_dict(await host.board("all"))
            lists = [BoardList.from_dict(entry) for entry in await host.lists("all")]
            cards = [Card.from_dict(entry) for entry in await host.cards("all")]
            summary = summarize_board(board, lists, cards)

            reply = await self._complete(
                api_key, build_board_health_prompt(summary), self.config.health_max_tokens
            )
            return BoardAnalysis(summary=summary, analysis=parse_freeform(reply))

        except InsightsError as e:
            logger.error(f"Board analysis failed: {e}")
            self.events.action_failed("analyze_board_health", type(e).__name__, str(e))
            raise

    async def get_card_suggestions(self, host: HostContext, card: Optional[Card] = None) -> Optional[str]:
        """Ask for 2-3 improvement suggestions; None when unconfigured or on failure."""
        try:
            api_key = await self._read_api_key(host)
            if not api_key:
                self.events.configuration_missing("get_card_suggestions")
                return None

            if card is None:
                card = Card.from_dict(await host.card("all"))
            reply = await self._complete(
                api_key, build_card_suggestions_prompt(card), self.config.suggestions_max_tokens
            )
            return parse_freeform(reply)
        except Exception as e:
            logger.error(f"Failed to get card suggestions: {e}")
            self.events.action_failed("get_card_suggestions", type(e).__name__, str(e))
            return None
