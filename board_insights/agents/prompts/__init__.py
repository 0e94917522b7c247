"""Prompt template loading and prompt builders."""

import json
from pathlib import Path

from board_insights.board.board_types import BoardSummary, Card

PROMPTS_DIR = Path(__file__).parent

NO_BREAKDOWN_DESCRIPTION = "No description provided"
NO_SUGGESTION_DESCRIPTION = "No description"
NO_DUE_DATE = "Not set"


def load_prompt(name: str) -> str:
    """Load a prompt template by name."""
    path = PROMPTS_DIR / f"{name}.txt"
    if not path.exists():
        raise ValueError(f"Prompt not found: {name}")
    return path.read_text(encoding="utf-8")


# Card text is embedded verbatim; nothing here neutralizes instructions
# hidden in titles or descriptions.

def build_breakdown_prompt(card: Card) -> str:
    """Prompt asking for 3-5 subtasks as a JSON array."""
    return load_prompt("breakdown").format(
        title=card.name,
        description=card.description or NO_BREAKDOWN_DESCRIPTION,
    )


def build_board_health_prompt(summary: BoardSummary) -> str:
    """Prompt asking for a short health assessment of the summarized board."""
    return load_prompt("board_health").format(
        board_data=json.dumps(summary.to_dict(), indent=2),
    )


def build_card_suggestions_prompt(card: Card) -> str:
    """Prompt asking for 2-3 one-sentence improvements to a card."""
    return load_prompt("card_suggestions").format(
        title=card.name,
        description=card.description or NO_SUGGESTION_DESCRIPTION,
        due=card.due_text or (card.due.isoformat() if card.due else NO_DUE_DATE),
        member_count=card.member_count,
    )
