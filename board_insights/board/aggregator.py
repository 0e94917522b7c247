"""Board aggregation - collapses board, list and card state into a BoardSummary."""

from datetime import datetime, timezone
from typing import Iterable, Optional

from board_insights.board.board_types import Board, BoardList, BoardSummary, Card, ListSummary


def is_overdue(card: Card, now: datetime) -> bool:
    """True if the card has a due date strictly before ``now``."""
    return card.due is not None and card.due < now


def summarize_board(
    board: Board,
    lists: Iterable[BoardList],
    cards: Iterable[Card],
    now: Optional[datetime] = None,
) -> BoardSummary:
    """
    Build a BoardSummary from host data.

    Args:
        board: Board header
        lists: Lists on the board, in display order
        cards: All cards on the board
        now: Reference time for overdue checks (default: current UTC time)

    Returns:
        BoardSummary with per-list counts, overdue and completed totals
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    cards = list(cards)

    return BoardSummary(
        name=board.name,
        total_cards=len(cards),
        lists=[
            ListSummary(
                name=board_list.name,
                card_count=sum(1 for card in cards if card.list_id == board_list.id),
            )
            for board_list in lists
        ],
        overdue_tasks=sum(1 for card in cards if is_overdue(card, now)),
        completed_tasks=sum(1 for card in cards if card.closed),
    )
