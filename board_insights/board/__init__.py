"""Board state types, aggregation and the local complexity heuristic."""

from board_insights.board.board_types import (
    Board,
    BoardList,
    BoardSummary,
    Card,
    Checklist,
    ComplexityLevel,
    ListSummary,
)
from board_insights.board.aggregator import summarize_board
from board_insights.board.complexity import (
    complexity_badge,
    complexity_color,
    complexity_level,
    complexity_score,
)

__all__ = [
    "Board",
    "BoardList",
    "BoardSummary",
    "Card",
    "Checklist",
    "ComplexityLevel",
    "ListSummary",
    "summarize_board",
    "complexity_badge",
    "complexity_color",
    "complexity_level",
    "complexity_score",
]
