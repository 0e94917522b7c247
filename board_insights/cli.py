"""Board Insights CLI."""

import asyncio
import json
import os

import click
from rich.console import Console
from rich.table import Table

console = Console()

LEVEL_STYLES = {"High": "red", "Med": "yellow", "Low": "green"}


def _load_host(snapshot: str, card_id: str = None):
    from .config import SECRET_KEY, SECRET_SCOPE, SECRET_VISIBILITY
    from .host.snapshot import SnapshotError, SnapshotHost

    try:
        host = SnapshotHost.from_file(snapshot, card_id=card_id)
    except (SnapshotError, json.JSONDecodeError) as e:
        raise click.ClickException(str(e))
    if card_id is not None and not any(entry.get("id") == card_id for entry in host.snapshot.get("cards", [])):
        raise click.ClickException(f"Card not found in snapshot: {card_id}")
    host.set_secret(SECRET_SCOPE, SECRET_VISIBILITY, SECRET_KEY, os.environ.get("ANTHROPIC_API_KEY"))
    return host


def _run(coro):
    from .host.snapshot import SnapshotError

    try:
        return asyncio.run(coro)
    except SnapshotError as e:
        raise click.ClickException(str(e))


def _agent():
    from .agents.assistant import InsightsAgent
    from .config import InsightsConfig

    return InsightsAgent(config=InsightsConfig.from_env())


@click.group()
def main():
    """Board Insights - AI-generated insights for project boards."""
    pass


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"board-insights v{__version__}")


@main.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("--all", "include_closed", is_flag=True, help="Include closed cards")
def complexity(snapshot: str, include_closed: bool):
    """Show the local complexity badge for each card."""
    from .board.board_types import Card
    from .board.complexity import complexity_level, complexity_score

    host = _load_host(snapshot)
    cards = [Card.from_dict(entry) for entry in asyncio.run(host.cards())]
    if not include_closed:
        cards = [card for card in cards if not card.closed]

    if not cards:
        console.print("[yellow]No cards on board[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim")
    table.add_column("Card")
    table.add_column("Score", justify="right")
    table.add_column("Complexity")

    for card in cards:
        level = complexity_level(card).value
        style = LEVEL_STYLES[level]
        table.add_row(
            card.id[:8],
            card.name[:50],
            str(complexity_score(card)),
            f"[{style}]{level}[/{style}]",
        )

    console.print(table)


@main.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
def summary(snapshot: str):
    """Print the board summary sent to the model."""
    from .board.aggregator import summarize_board
    from .board.board_types import Board, BoardList, Card

    host = _load_host(snapshot)
    board = Board.from_dict(asyncio.run(host.board()))
    lists = [BoardList.from_dict(entry) for entry in asyncio.run(host.lists())]
    cards = [Card.from_dict(entry) for entry in asyncio.run(host.cards())]

    click.echo(json.dumps(summarize_board(board, lists, cards).to_dict(), indent=2))


@main.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.argument("card_id")
def breakdown(snapshot: str, card_id: str):
    """Break a card down into subtasks."""
    from .agents.insight_types import OutcomeKind

    host = _load_host(snapshot, card_id=card_id)
    outcome = _run(_agent().break_down_task(host))

    if outcome.kind == OutcomeKind.CONFIGURE:
        raise click.ClickException("Setup required: set ANTHROPIC_API_KEY")
    if outcome.kind == OutcomeKind.FAILED:
        raise click.ClickException(outcome.message)

    if outcome.kind == OutcomeKind.RAW_TEXT:
        console.print("[yellow]Reply was not a subtask list; showing it as-is[/yellow]")
        click.echo(outcome.text)
        return

    table = Table(title="Task Breakdown")
    table.add_column("#", style="dim")
    table.add_column("Task")
    table.add_column("Description")
    table.add_column("Estimate")
    for i, subtask in enumerate(outcome.subtasks, start=1):
        table.add_row(str(i), subtask.task, subtask.description, subtask.estimated_time)
    console.print(table)


@main.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print summary and analysis as JSON")
def health(snapshot: str, as_json: bool):
    """Ask the model for a board health analysis."""
    from .errors import InsightsError

    host = _load_host(snapshot)
    try:
        result = _run(_agent().analyze_board_health(host))
    except InsightsError as e:
        raise click.ClickException(f"Board analysis failed: {e}")

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    console.print(f"\n[bold]{result.summary.name}[/bold]: {result.summary.total_cards} cards, "
                  f"{result.summary.overdue_tasks} overdue, {result.summary.completed_tasks} completed\n")
    click.echo(result.analysis)


@main.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.argument("card_id")
def suggest(snapshot: str, card_id: str):
    """Ask the model how to improve a card."""
    host = _load_host(snapshot, card_id=card_id)
    suggestions = _run(_agent().get_card_suggestions(host))

    if suggestions is None:
        raise click.ClickException("No suggestions available (check ANTHROPIC_API_KEY)")
    click.echo(suggestions)


if __name__ == "__main__":
    main()
