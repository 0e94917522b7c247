"""Local complexity heuristic for cards. No network access."""

from board_insights.board.board_types import Card, ComplexityLevel

HIGH_THRESHOLD = 200
MED_THRESHOLD = 100

CHECKLIST_ITEM_WEIGHT = 10
MEMBER_WEIGHT = 5

BADGE_TITLE = "AI Complexity"

LEVEL_COLORS = {
    ComplexityLevel.HIGH: "red",
    ComplexityLevel.MED: "yellow",
    ComplexityLevel.LOW: "green",
}


def complexity_score(card: Card) -> int:
    """Description length plus weighted checklist item and member counts."""
    return (
        len(card.description or "")
        + CHECKLIST_ITEM_WEIGHT * card.checklist_item_count
        + MEMBER_WEIGHT * card.member_count
    )


def level_for_score(score: int) -> ComplexityLevel:
    if score > HIGH_THRESHOLD:
        return ComplexityLevel.HIGH
    if score > MED_THRESHOLD:
        return ComplexityLevel.MED
    return ComplexityLevel.LOW


def complexity_level(card: Card) -> ComplexityLevel:
    return level_for_score(complexity_score(card))


def complexity_color(card: Card) -> str:
    return LEVEL_COLORS[complexity_level(card)]


def complexity_badge(card: Card) -> dict:
    """Card-detail badge payload for the host."""
    level = complexity_level(card)
    return {
        "title": BADGE_TITLE,
        "text": level.value,
        "color": LEVEL_COLORS[level],
    }
