"""Command-line interface for stretchpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for multi-size resizing
- Verbose/quiet output modes
- Dry-run mode showing stretch factors
- Detailed error reporting
"""

from stretchpath.cli.app import cli, main

__all__ = ["cli", "main"]
