"""Command-line interface for onionmaze.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- hull: sample points and print the Gift Wrapping result
- maze: sample points and print the onion layers and maze
- JSON output for downstream renderers
"""

from onionmaze.cli.app import cli, main

__all__ = ["cli", "main"]
