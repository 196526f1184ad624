"""Rich console output formatting utilities."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from starrealms.exceptions import ClientDataDecodeError
from starrealms.models import Activity, Challenge, Game

console = Console()


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


def _turn_label(game: Game) -> str:
    try:
        return game.whose_turn()
    except ClientDataDecodeError as e:
        print_warning(f"Game {game.game_id}: {e}")
        return "?"


def create_profile_panel(activity: Activity) -> Panel:
    """Create a panel summarizing the player's profile counters.

    Args:
        activity: Activity snapshot

    Returns:
        Rich Panel instance
    """
    content = f"""[bold]Avatar:[/bold] {activity.avatar}
[bold]Level:[/bold] {activity.level}
[bold]Rank Stars:[/bold] {activity.rank_stars} / {activity.rank_total_stars}
[bold]Arena Trophy Stars:[/bold] {activity.arena_trophy_stars}
[bold]Free Arena:[/bold] {format_flag(activity.has_free_arena)}
[bold]Accepted Terms:[/bold] {format_flag(activity.accepted_terms)}

[bold cyan]Summary[/bold cyan]
  Challenges: {len(activity.challenges)}
  Active Games: {len(activity.active_games)}
  Finished Games: {len(activity.finished_games)}"""

    return Panel(content, title=f"[bold]{activity.result}[/bold]", border_style="blue")


def create_games_table(games: list[Game], title: str) -> Table:
    """Create a rich table of game records."""
    table = Table(title=title)

    table.add_column("Game ID", style="cyan", no_wrap=True)
    table.add_column("Opponent", style="magenta")
    table.add_column("Timing")
    table.add_column("Turn")
    table.add_column("Won", justify="center")
    table.add_column("League", justify="center")
    table.add_column("Tournament", justify="center")
    table.add_column("Updated", no_wrap=True)

    for game in games:
        table.add_row(
            str(game.game_id),
            game.opponent_name,
            game.timing,
            _turn_label(game),
            format_flag(game.won),
            format_flag(game.is_league_game),
            format_flag(game.is_tournament_game),
            game.last_updated_time,
        )

    return table


def create_challenges_table(challenges: list[Challenge]) -> Table:
    """Create a rich table of pending challenges."""
    table = Table(title="Challenges")

    table.add_column("Challenge ID", style="cyan", no_wrap=True)
    table.add_column("Challenger", style="magenta")
    table.add_column("Commander")
    table.add_column("Opponent")
    table.add_column("Status")
    table.add_column("Timing")
    table.add_column("Updated", no_wrap=True)

    for challenge in challenges:
        table.add_row(
            str(challenge.challenge_id),
            challenge.challenger_name,
            challenge.challenger_commander,
            challenge.opponent_name,
            challenge.status_description or challenge.status,
            challenge.timing,
            challenge.last_updated_time,
        )

    return table
