"""Capability dispatch table handed to the host runtime.

The table maps each named host trigger to a handler. It is built once at
startup with ``build_capabilities`` and passed to the runtime by ``register``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from board_insights.board.board_types import Card
from board_insights.board.complexity import complexity_badge
from board_insights.host.base import HostContext

logger = logging.getLogger(__name__)

POWERUP_NAME = "Claude AI Assistant"

BOARD_BUTTONS = "board-buttons"
CARD_BUTTONS = "card-buttons"
CARD_DETAIL_BADGES = "card-detail-badges"
SHOW_SETTINGS = "show-settings"

Handler = Callable[[HostContext, Optional[dict]], Awaitable[Any]]


@dataclass
class Button:
    """A host button and the action it triggers."""

    text: str
    callback: Callable[[HostContext], Awaitable[Any]]
    icon: Optional[str] = None


def build_capabilities(agent) -> dict[str, Handler]:
    """
    Build the trigger -> handler table for an InsightsAgent.

    Args:
        agent: InsightsAgent whose actions the buttons trigger

    Returns:
        Dict keyed by host trigger name
    """

    async def open_board_analysis(t: HostContext):
        return await t.popup(title="Claude AI Board Analysis", url="./board-analysis.html", height=500)

    async def open_card_assistant(t: HostContext):
        return await t.popup(title="Claude AI Card Assistant", url="./card-assistant.html", height=600)

    async def board_buttons(t: HostContext, options: Optional[dict] = None) -> list[Button]:
        return [Button(text="Claude Analysis", callback=open_board_analysis)]

    async def card_buttons(t: HostContext, options: Optional[dict] = None) -> list[Button]:
        return [
            Button(text="AI Assist", callback=open_card_assistant),
            Button(text="Break Down Task", callback=agent.break_down_task),
        ]

    async def card_detail_badges(t: HostContext, options: Optional[dict] = None) -> list[dict]:
        card = Card.from_dict(await t.card("all"))
        return [complexity_badge(card)]

    async def show_settings(t: HostContext, options: Optional[dict] = None):
        return await t.popup(title="Claude AI Settings", url="./settings.html", height=300)

    return {
        BOARD_BUTTONS: board_buttons,
        CARD_BUTTONS: card_buttons,
        CARD_DETAIL_BADGES: card_detail_badges,
        SHOW_SETTINGS: show_settings,
    }


def register(runtime, capabilities: dict[str, Handler]) -> Any:
    """Hand the capability table to the host runtime's ``initialize`` hook."""
    logger.info(f"Registering {POWERUP_NAME} with capabilities: {', '.join(sorted(capabilities))}")
    return runtime.initialize(capabilities)
