"""Exception classes for rule-tictactoe."""

from typing import Optional


class RuleTicTacToeError(Exception):
    """Base exception for all rule-tictactoe errors."""

    pass


class ConfigurationError(RuleTicTacToeError):
    """Raised when configuration is invalid."""

    pass


class RuleFileError(RuleTicTacToeError):
    """Raised when a rule file cannot be opened, created or written."""

    pass


class RuleParseError(RuleFileError):
    """Raised when a rule file line is malformed."""

    def __init__(
        self,
        reason: str,
        line_number: Optional[int] = None,
        path: Optional[str] = None,
    ) -> None:
        self.reason = reason
        self.line_number = line_number
        self.path = path

        location = ""
        if path is not None:
            location = f"{path}:"
        if line_number is not None:
            location += f"{line_number}:"
        super().__init__(f"{location} {reason}" if location else reason)
