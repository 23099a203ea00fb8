"""rule-tictactoe run command."""

from pathlib import Path

import click
from rich.console import Console

from rule_tictactoe.agents.philosopher import Philosopher
from rule_tictactoe.config import AppConfig
from rule_tictactoe.feedback import build_adapter
from rule_tictactoe.rule_io import new_rules_path, read_rules, write_rules
from rule_tictactoe.simulate import print_simulation_results, run_games

console = Console()


@click.command()
@click.option("--count", "-n", type=click.IntRange(min=0), default=1, help="Number of games")
@click.option(
    "--rule-file1",
    required=True,
    type=click.Path(path_type=Path),
    help="Rule file for player 1",
)
@click.option(
    "--rule-file2",
    required=True,
    type=click.Path(path_type=Path),
    help="Rule file for player 2",
)
@click.pass_context
def run_command(ctx: click.Context, count: int, rule_file1: Path, rule_file2: Path) -> None:
    """Simulate games between two rule files.

    Both players' rule weights are updated during the games and written to
    the input paths with a '.new' suffix.

    Examples:
        rule-tictactoe run --count 100 --rule-file1 p1.rules --rule-file2 p2.rules
    """
    config: AppConfig = ctx.obj["config"]

    player_one = Philosopher(
        config.simulation.player_one_name,
        read_rules(rule_file1),
        build_adapter(config.feedback),
    )
    player_two = Philosopher(
        config.simulation.player_two_name,
        read_rules(rule_file2),
        build_adapter(config.feedback),
    )

    results = run_games(
        player_one, player_two, count, turn_cap=config.simulation.turn_cap
    )

    output1 = new_rules_path(rule_file1)
    output2 = new_rules_path(rule_file2)
    write_rules(player_one.rules, output1)
    write_rules(player_two.rules, output2)

    print_simulation_results(results, console)
    console.print(f"[green]✓[/green] Updated rules written to {output1} and {output2}")
