"""Tests for prompt loading and building."""

import json

import pytest


def test_load_breakdown_prompt():
    from board_insights.agents.prompts import load_prompt

    prompt = load_prompt("breakdown")

    assert "{title}" in prompt
    assert "{description}" in prompt
    assert "estimatedTime" in prompt


def test_load_unknown_prompt_raises():
    from board_insights.agents.prompts import load_prompt

    with pytest.raises(ValueError, match="Prompt not found"):
        load_prompt("nope")


def test_breakdown_prompt_embeds_card():
    from board_insights.agents.prompts import build_breakdown_prompt
    from board_insights.board.board_types import Card

    prompt = build_breakdown_prompt(Card(id="c", name="Set up CI", description="Use {braces} freely"))

    assert "Title: Set up CI" in prompt
    assert "Description: Use {braces} freely" in prompt
    assert "3-5" in prompt
    assert '"estimatedTime": "2h"' in prompt
    assert "Can be completed in one sitting" in prompt


def test_breakdown_prompt_default_description():
    from board_insights.agents.prompts import build_breakdown_prompt
    from board_insights.board.board_types import Card

    prompt = build_breakdown_prompt(Card(id="c", name="Empty"))

    assert "Description: No description provided" in prompt


def test_board_health_prompt_embeds_summary_json():
    from board_insights.agents.prompts import build_board_health_prompt
    from board_insights.board.board_types import BoardSummary, ListSummary

    summary = BoardSummary(name="Ops", total_cards=4, lists=[ListSummary("Backlog", 4)], overdue_tasks=2)

    prompt = build_board_health_prompt(summary)

    assert json.dumps(summary.to_dict(), indent=2) in prompt
    assert "under 200 words" in prompt
    assert "2-3 actionable items" in prompt


def test_card_suggestions_prompt_defaults():
    from board_insights.agents.prompts import build_card_suggestions_prompt
    from board_insights.board.board_types import Card

    prompt = build_card_suggestions_prompt(Card(id="c", name="Fix login"))

    assert "Title: Fix login" in prompt
    assert "Description: No description" in prompt
    assert "Due Date: Not set" in prompt
    assert "Members: 0" in prompt
    assert "one sentence" in prompt


def test_card_suggestions_prompt_with_due_and_members():
    from datetime import datetime, timezone
    from board_insights.agents.prompts import build_card_suggestions_prompt
    from board_insights.board.board_types import Card

    card = Card(
        id="c",
        name="Fix login",
        due=datetime(2024, 5, 1, tzinfo=timezone.utc),
        member_ids=["a", "b", "c"],
    )

    prompt = build_card_suggestions_prompt(card)

    assert "Due Date: 2024-05-01T00:00:00+00:00" in prompt
    assert "Members: 3" in prompt


def test_card_suggestions_prompt_uses_host_due_string():
    from board_insights.agents.prompts import build_card_suggestions_prompt
    from board_insights.board.board_types import Card

    card = Card.from_dict({"id": "c", "name": "Fix login", "due": "2020-01-01T12:00:00.000Z"})

    assert "Due Date: 2020-01-01T12:00:00.000Z" in build_card_suggestions_prompt(card)
    assert "Due Date: Not set" in build_card_suggestions_prompt(Card(id="c", name="No due"))
