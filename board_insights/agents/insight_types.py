"""Data types for parsed model replies and action outcomes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from board_insights.board.board_types import BoardSummary


class Subtask(BaseModel):
    """One item of a task breakdown, as returned by the model."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "task": "Draft the API schema",
                "description": "List endpoints and payloads",
                "estimatedTime": "2h",
            }
        },
    )

    task: StrictStr = Field(..., description="Specific actionable task")
    description: StrictStr = Field(..., description="What needs to be done")
    estimated_time: StrictStr = Field(..., alias="estimatedTime", description="Rough effort, e.g. 2h")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)

    @property
    def label(self) -> str:
        """Popup item text."""
        return f"{self.task} ({self.estimated_time})"


@dataclass
class BreakdownResult:
    """
    Outcome of parsing a breakdown reply.

    Exactly one of ``subtasks`` (structured) or ``raw_text`` (fallback) is meaningful:
    when parsing fails ``subtasks`` is empty and ``raw_text`` holds the original reply.
    """

    subtasks: list[Subtask] = field(default_factory=list)
    raw_text: Optional[str] = None

    @property
    def is_structured(self) -> bool:
        return self.raw_text is None

    @classmethod
    def structured(cls, subtasks: list[Subtask]) -> "BreakdownResult":
        return cls(subtasks=list(subtasks))

    @classmethod
    def fallback(cls, raw_text: str) -> "BreakdownResult":
        return cls(subtasks=[], raw_text=raw_text)


@dataclass
class BoardAnalysis:
    """Board health analysis: the summary sent and the model's text."""

    summary: BoardSummary
    analysis: str

    def to_dict(self) -> dict:
        return {"boardData": self.summary.to_dict(), "analysis": self.analysis}


class OutcomeKind(Enum):
    """What a task-breakdown action ended up showing."""

    CONFIGURE = "configure"
    SUBTASKS = "subtasks"
    RAW_TEXT = "raw_text"
    FAILED = "failed"


@dataclass
class ActionOutcome:
    """Result of a user-triggered action, plus whatever the host returned for it."""

    kind: OutcomeKind
    subtasks: list[Subtask] = field(default_factory=list)
    text: Optional[str] = None
    message: str = ""
    host_result: object = None
