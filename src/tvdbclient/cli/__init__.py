"""Command-line interface for tvdbclient.

- app: The Typer application object with the search, episode, episodes,
  lookup, set-key and version commands.
- console: Rich Console instance for consistent, styled output.
"""

from tvdbclient.cli.commands import app, console, main

__all__ = ["app", "console", "main"]
