"""rule-tictactoe process-rules command."""

import logging
from pathlib import Path
from typing import Optional

import click

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--filename",
    "-f",
    type=click.Path(path_type=Path),
    help="Rule file to process",
)
def process_rules_command(filename: Optional[Path]) -> None:
    """Process a rule file (reserved, currently does nothing)."""
    logger.info("Processing rule files")
