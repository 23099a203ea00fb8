"""Command line interface for rule-tictactoe."""
