"""Command-line interface for digitopo.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Contour extraction from 2D bitmaps, with Freeman chains or JSON output
- Surface extraction and traversal from bitmaps and volumes
- Quiet output mode
- Detailed error reporting
"""

from digitopo.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
