"""Reading and writing rule files.

One rule per line: nine pattern digits (0-3) with no separator, a tab, the
target cell digit (0-8), a tab, and the weight as a decimal number::

    113333333\t2\t-4.0
"""

import logging
import math
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from rule_tictactoe.exceptions import RuleFileError, RuleParseError
from rule_tictactoe.rules import PATTERN_SIZE, Rule

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

NEW_SUFFIX = ".new"

# Optional sign, digits with optional fraction, optional exponent
WEIGHT_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def format_rule(rule: Rule) -> str:
    """Format a rule as one line of a rule file, without the newline."""
    return f"{rule.pattern_key()}\t{rule.target}\t{rule.weight!r}"


def parse_rule(line: str, line_number: Optional[int] = None) -> Rule:
    """
    Parse one line of a rule file.

    Args:
        line: Line text, with or without its trailing newline
        line_number: Line number used in error messages

    Returns:
        Parsed rule

    Raises:
        RuleParseError: If the line is malformed
    """
    fields = line.rstrip("\r\n").split("\t")
    if len(fields) != 3:
        raise RuleParseError(
            f"expected 3 tab-separated fields, got {len(fields)}", line_number
        )
    pattern_text, target_text, weight_text = fields

    if len(pattern_text) != PATTERN_SIZE or any(c not in "0123" for c in pattern_text):
        raise RuleParseError(
            f"pattern must be {PATTERN_SIZE} digits in 0-3, got {pattern_text!r}",
            line_number,
        )
    if len(target_text) != 1 or target_text not in "012345678":
        raise RuleParseError(
            f"target must be a single digit in 0-8, got {target_text!r}", line_number
        )
    if not WEIGHT_PATTERN.fullmatch(weight_text):
        raise RuleParseError(f"weight is not a number: {weight_text!r}", line_number)
    weight = float(weight_text)
    if not math.isfinite(weight):
        raise RuleParseError(f"weight must be finite, got {weight_text!r}", line_number)

    return Rule(
        pattern=[int(c) for c in pattern_text],
        target=int(target_text),
        weight=weight,
    )


def read_rules(path: PathLike) -> List[Rule]:
    """
    Read a rule file, keeping the rules in file order.

    Args:
        path: Rule file path

    Returns:
        Rules in the order they appear in the file

    Raises:
        RuleFileError: If the file cannot be read
        RuleParseError: If any line is malformed; nothing is returned
    """
    logger.info("Reading rule file %s", path)
    try:
        with open(path, "r", encoding="ascii") as f:
            rules = [parse_rule(line, number) for number, line in enumerate(f, start=1)]
    except RuleParseError as e:
        raise RuleParseError(e.reason, e.line_number, path=str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise RuleFileError(f"Failed to read rule file {path}: {e}") from e
    logger.info("Read %d rules from %s", len(rules), path)
    return rules


def write_rules(rules: Iterable[Rule], path: PathLike) -> None:
    """
    Write rules to a file, one per line, replacing any existing file.

    Args:
        rules: Rules to write, in order
        path: Destination path

    Raises:
        RuleFileError: If the file cannot be created or written
    """
    try:
        with open(path, "w", encoding="ascii", newline="\n") as f:
            count = 0
            for rule in rules:
                f.write(format_rule(rule) + "\n")
                count += 1
    except OSError as e:
        raise RuleFileError(f"Failed to write rule file {path}: {e}") from e
    logger.info("Wrote %d rules to %s", count, path)


def new_rules_path(path: PathLike) -> Path:
    """Return the output path for updated rules: the input path plus '.new'."""
    return Path(str(path) + NEW_SUFFIX)
