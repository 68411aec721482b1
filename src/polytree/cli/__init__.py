"""Command-line interface for polytree.

This module provides the CLI using Typer with rich output.

Key features:
- Tree statistics for a boundary file
- Point checks against a boundary file
"""

from polytree.cli.app import cli, main

__all__ = ["cli", "main"]
