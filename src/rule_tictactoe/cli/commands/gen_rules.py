"""rule-tictactoe gen-rules command."""

import logging
from pathlib import Path

import click
from rich.console import Console

from rule_tictactoe.rule_io import write_rules
from rule_tictactoe.rules import generate_rules

console = Console()
logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--count", "-n", type=click.IntRange(min=0), default=1, help="Number of rules"
)
@click.option(
    "--filename",
    "-f",
    required=True,
    type=click.Path(path_type=Path),
    help="Output rule file",
)
@click.pass_context
def gen_rules_command(ctx: click.Context, count: int, filename: Path) -> None:
    """Generate uniformly random rules.

    Each rule gets a random pattern, a random target cell and weight 0.
    Use the global --seed option to make the output reproducible.

    Examples:
        rule-tictactoe gen-rules --count 10000 --filename p1.rules
    """
    logger.info("Generating rules")
    rules = generate_rules(count, ctx.obj["rng"])
    logger.info("Generated random rules. Count: %d", len(rules))
    write_rules(rules, filename)
    console.print(f"[green]✓[/green] Wrote {len(rules)} rules to {filename}")
