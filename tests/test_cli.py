"""Tests for CLI commands."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from conftest import SAMPLE_SNAPSHOT, MockProvider


@pytest.fixture
def snapshot_path(tmp_path):
    path = tmp_path / "board.json"
    path.write_text(json.dumps(SAMPLE_SNAPSHOT))
    return str(path)


def _patched_agent(provider):
    from board_insights.agents.assistant import InsightsAgent

    return patch("board_insights.cli._agent", lambda: InsightsAgent(provider_factory=lambda key: provider))


def test_version_command():
    from board_insights.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["version"])

    assert result.exit_code == 0
    assert "board-insights v" in result.output


def test_complexity_command(snapshot_path):
    from board_insights.cli import main

    result = CliRunner().invoke(main, ["complexity", snapshot_path])

    assert result.exit_code == 0
    assert "Write launch blog post" in result.output
    assert "Ship release" not in result.output


def test_summary_command(snapshot_path):
    from board_insights.cli import main

    result = CliRunner().invoke(main, ["summary", snapshot_path])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["totalCards"] == 2
    assert data["completedTasks"] == 1


def test_breakdown_requires_api_key(snapshot_path, monkeypatch):
    from board_insights.cli import main

    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    result = CliRunner().invoke(main, ["breakdown", snapshot_path, "c1"])

    assert result.exit_code != 0
    assert "Setup required" in result.output


def test_breakdown_prints_subtasks(snapshot_path, monkeypatch):
    from board_insights.cli import main

    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")
    provider = MockProvider('[{"task":"Outline","description":"Key points","estimatedTime":"1h"}]')

    with _patched_agent(provider):
        result = CliRunner().invoke(main, ["breakdown", snapshot_path, "c1"])

    assert result.exit_code == 0
    assert "Outline" in result.output


def test_breakdown_unknown_card(snapshot_path, monkeypatch):
    from board_insights.cli import main

    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")

    with _patched_agent(MockProvider("x")):
        result = CliRunner().invoke(main, ["breakdown", snapshot_path, "nope"])

    assert result.exit_code != 0
    assert "Card not found" in result.output


def test_health_json(snapshot_path, monkeypatch):
    from board_insights.cli import main

    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")

    with _patched_agent(MockProvider("Looks fine.")):
        result = CliRunner().invoke(main, ["health", snapshot_path, "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["analysis"] == "Looks fine."
    assert data["boardData"]["name"] == "Launch Plan"


def test_health_without_key_fails(snapshot_path, monkeypatch):
    from board_insights.cli import main

    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    result = CliRunner().invoke(main, ["health", snapshot_path])

    assert result.exit_code != 0
    assert "Board analysis failed" in result.output


def test_suggest_command(snapshot_path, monkeypatch):
    from board_insights.cli import main

    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")

    with _patched_agent(MockProvider("Add acceptance criteria.")):
        result = CliRunner().invoke(main, ["suggest", snapshot_path, "c1"])

    assert result.exit_code == 0
    assert "Add acceptance criteria." in result.output


def test_suggest_unknown_card(snapshot_path, monkeypatch):
    from board_insights.cli import main

    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")

    with _patched_agent(MockProvider("x")):
        result = CliRunner().invoke(main, ["suggest", snapshot_path, "nope"])

    assert result.exit_code != 0
    assert "Card not found in snapshot: nope" in result.output
