"""Command-line interface for decktransfer.

This module provides the batch CLI using Typer with rich output for
user-friendly feedback.

Commands:
- import: Load a section file and transfer it to the analysis tool
- validate: Check geometry and derivation of a section file
- info: Print stored section properties
- derive: List derived centerlines and cutlines
"""

from decktransfer.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
