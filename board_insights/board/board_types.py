"""Data types for board and card state supplied by the host."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


def parse_due(value) -> Optional[datetime]:
    """Parse a host due date (ISO-8601, optionally ``Z``-suffixed) as an aware datetime.

    Naive values are taken as UTC. Anything unparseable is treated as no due date.
    """
    if not value:
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            logger.warning(f"Ignoring unparseable due date: {value!r}")
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class ComplexityLevel(Enum):
    """Complexity badge levels."""

    LOW = "Low"
    MED = "Med"
    HIGH = "High"


@dataclass
class Checklist:
    """A card checklist; only the number of items is used."""

    id: str = ""
    name: str = ""
    items: list[dict] = field(default_factory=list)

    @property
    def item_count(self) -> int:
        return len(self.items)

    @classmethod
    def from_dict(cls, data: dict) -> "Checklist":
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            items=list(data.get("checkItems") or []),
        )


@dataclass
class Card:
    """A single card, read-only to the insight pipeline."""

    id: str
    name: str
    description: Optional[str] = None
    due: Optional[datetime] = None
    member_ids: list[str] = field(default_factory=list)
    checklists: list[Checklist] = field(default_factory=list)
    closed: bool = False
    list_id: Optional[str] = None
    # due exactly as the host sent it
    due_text: Optional[str] = None

    @property
    def checklist_item_count(self) -> int:
        return sum(checklist.item_count for checklist in self.checklists)

    @property
    def member_count(self) -> int:
        return len(self.member_ids)

    @classmethod
    def from_dict(cls, data: dict) -> "Card":
        """Create from a host card record (``desc``, ``idMembers``, ``idList`` keys)."""
        due = data.get("due")
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            description=data.get("desc"),
            due=parse_due(due),
            member_ids=list(data.get("idMembers") or []),
            checklists=[Checklist.from_dict(c) for c in data.get("checklists") or []],
            closed=bool(data.get("closed", False)),
            list_id=data.get("idList"),
            due_text=due if isinstance(due, str) and due else None,
        )


@dataclass
class Board:
    """A board header."""

    id: str
    name: str

    @classmethod
    def from_dict(cls, data: dict) -> "Board":
        return cls(id=data.get("id", ""), name=data.get("name", ""))


@dataclass
class BoardList:
    """A list (column) on a board."""

    id: str
    name: str

    @classmethod
    def from_dict(cls, data: dict) -> "BoardList":
        return cls(id=data.get("id", ""), name=data.get("name", ""))


@dataclass
class ListSummary:
    """Card count for one list."""

    name: str
    card_count: int

    def to_dict(self) -> dict:
        return {"name": self.name, "cardCount": self.card_count}


@dataclass
class BoardSummary:
    """Compact board view used for prompting. Recomputed on every request."""

    name: str
    total_cards: int
    lists: list[ListSummary] = field(default_factory=list)
    overdue_tasks: int = 0
    completed_tasks: int = 0

    def to_dict(self) -> dict:
        """Convert to the JSON shape embedded in the board-health prompt."""
        return {
            "name": self.name,
            "totalCards": self.total_cards,
            "lists": [entry.to_dict() for entry in self.lists],
            "overdueTasks": self.overdue_tasks,
            "completedTasks": self.completed_tasks,
        }
