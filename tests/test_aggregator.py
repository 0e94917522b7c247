"""Tests for board aggregation."""

from datetime import datetime, timedelta, timezone

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _lists():
    from board_insights.board.board_types import BoardList

    return [BoardList("a", "To Do"), BoardList("b", "Doing"), BoardList("c", "Done")]


def test_per_list_counts_and_total():
    from board_insights.board.aggregator import summarize_board
    from board_insights.board.board_types import Board, Card

    cards = (
        [Card(id=f"a{i}", name="x", list_id="a") for i in range(2)]
        + [Card(id=f"c{i}", name="x", list_id="c") for i in range(5)]
    )

    summary = summarize_board(Board("b", "Board"), _lists(), cards, now=NOW)

    assert summary.name == "Board"
    assert summary.total_cards == 7
    assert [entry.card_count for entry in summary.lists] == [2, 0, 5]
    assert [entry.name for entry in summary.lists] == ["To Do", "Doing", "Done"]


def test_overdue_and_completed_counts():
    from board_insights.board.aggregator import summarize_board
    from board_insights.board.board_types import Board, Card

    cards = [
        Card(id="1", name="late", list_id="a", due=NOW - timedelta(days=1), closed=False),
        Card(id="2", name="future", list_id="a", due=NOW + timedelta(days=1)),
        Card(id="3", name="no due", list_id="b"),
        Card(id="4", name="closed future", list_id="c", due=NOW + timedelta(days=3), closed=True),
        Card(id="5", name="closed no due", list_id="c", closed=True),
    ]

    summary = summarize_board(Board("b", "Board"), _lists(), cards, now=NOW)

    assert summary.overdue_tasks == 1
    assert summary.completed_tasks == 2


def test_due_exactly_now_is_not_overdue():
    from board_insights.board.aggregator import summarize_board
    from board_insights.board.board_types import Board, Card

    summary = summarize_board(Board("b", "B"), [], [Card(id="1", name="x", due=NOW)], now=NOW)

    assert summary.overdue_tasks == 0


def test_empty_board():
    from board_insights.board.aggregator import summarize_board
    from board_insights.board.board_types import Board

    summary = summarize_board(Board("b", "Empty"), [], [], now=NOW)

    assert summary.total_cards == 0
    assert summary.lists == []
    assert summary.overdue_tasks == 0
