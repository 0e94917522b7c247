"""Agents for board insights."""

from board_insights.agents.assistant import InsightsAgent
from board_insights.agents.insight_types import (
    ActionOutcome,
    BoardAnalysis,
    BreakdownResult,
    OutcomeKind,
    Subtask,
)

__all__ = [
    "InsightsAgent",
    "ActionOutcome",
    "BoardAnalysis",
    "BreakdownResult",
    "OutcomeKind",
    "Subtask",
]
