"""Main CLI entry point for rule-tictactoe."""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

import click
import numpy as np
from rich.console import Console

from rule_tictactoe.cli.commands.gen_rules import gen_rules_command
from rule_tictactoe.cli.commands.process_rules import process_rules_command
from rule_tictactoe.cli.commands.run import run_command
from rule_tictactoe.config import load_config
from rule_tictactoe.exceptions import RuleTicTacToeError
from rule_tictactoe.logging_setup import configure_logging

console = Console()
logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to YAML configuration file",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed (default: derived from the current time)",
)
@click.pass_context
def cli(
    ctx: click.Context, verbose: bool, config: Optional[Path], seed: Optional[int]
) -> None:
    """Rule-based Tic-Tac-Toe philosophers.

    Two agents play repeated games, each choosing moves from an ordered list
    of pattern rules. Rule weights are adjusted after every evaluation and
    written back to rule files at the end of a run.

    \b
    Examples:
        rule-tictactoe gen-rules --count 10000 --filename p1.rules
        rule-tictactoe run --count 100 --rule-file1 p1.rules --rule-file2 p2.rules
        rule-tictactoe --seed 42 gen-rules --count 500 --filename p2.rules
    """
    ctx.ensure_object(dict)

    app_config = load_config(config)
    level = "DEBUG" if verbose else app_config.logging.level
    configure_logging(level)

    logger.info("Running option [%s]", ctx.invoked_subcommand)

    if seed is None:
        seed = time.time_ns()
    logger.info("Using random seed %d", seed)

    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = app_config
    ctx.obj["seed"] = seed
    ctx.obj["rng"] = np.random.default_rng(seed)


cli.add_command(run_command, name="run")
cli.add_command(gen_rules_command, name="gen-rules")
cli.add_command(process_rules_command, name="process-rules")


def main() -> None:
    """Main entry point for the CLI."""
    # Non-standalone so interrupts reach this handler instead of click's
    try:
        cli(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except RuleTicTacToeError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except (KeyboardInterrupt, click.exceptions.Abort):
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
