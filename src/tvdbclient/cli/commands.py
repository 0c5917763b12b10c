"""CLI commands for tvdbclient.

Small lookup programs on top of the library, mainly for trying out an API key
and inspecting what TheTVDB returns for a show.
- Uses Typer for declarative CLI structure and option parsing.
- All output is routed through Rich Console for consistent, styled UX.

Design:
- Typer app and Console are instantiated at module level for reuse across
  commands.
- The API key is resolved as --api-key > TVDBCLIENT_TVDB_API_KEY >
  config.toml > TVDB_API_KEY / .env.
- Every TvdbError is reported in red and mapped to a non-zero exit code.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tvdbclient.api import Tvdb
from tvdbclient.cache import CachingRequestClient
from tvdbclient.errors import TvdbError
from tvdbclient.legacy import LegacyTvdb
from tvdbclient.settings import MissingAPIKeyError, Settings
from tvdbclient.transport import DefaultHttpClient, RequestClient
from tvdbclient.utils import config
from tvdbclient.utils.debug import debug, error, info, setup_logger

app = typer.Typer(
    name="tvdbclient",
    help="Look up TV series and episodes on TheTVDB.",
    add_completion=False,
)
console = Console()


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1


API_KEY = Annotated[
    Optional[str],
    typer.Option(
        "--api-key",
        "-k",
        help="TheTVDB API key (overrides environment and config file)",
    ),
]

LANGUAGE = Annotated[
    str,
    typer.Option(
        "--lang",
        "-l",
        help="Two-letter language code for legacy lookups",
    ),
]


@app.callback()
def callback(
    verbose: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Log every request the clients make (same as TVDBCLIENT_DEBUG=1)",
        ),
    ] = False,
) -> None:
    """Look up TV series and episodes on TheTVDB."""
    setup_logger(verbose=True if verbose else None)


@contextmanager
def _reported_errors() -> Iterator[None]:
    """Turn library errors into a red message and exit code 1."""
    try:
        yield
    except (TvdbError, MissingAPIKeyError) as e:
        error(f"{type(e).__name__}: {e}")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=ExitCode.ERROR) from e


def _resolve_api_key(settings: Settings, cli_value: Optional[str]) -> str:
    key = config.resolve_setting(
        "tvdb.api_key", default=settings.TVDB_API_KEY, cli_value=cli_value
    )
    if not key:
        raise MissingAPIKeyError("TVDB_API_KEY")
    return str(key)


def _json_api(api_key: Optional[str]) -> Tvdb:
    settings = Settings()
    api = Tvdb.from_settings(settings, key=_resolve_api_key(settings, api_key))
    debug(f"Using JSON API at {api.base_url}")
    api.login()
    return api


def _legacy_api(api_key: Optional[str]) -> LegacyTvdb:
    settings = Settings()
    http_client: RequestClient = DefaultHttpClient(timeout=settings.TVDB_TIMEOUT)
    if settings.TVDB_CACHE_DIR:
        http_client = CachingRequestClient(http_client, Path(settings.TVDB_CACHE_DIR))
    debug(f"Using legacy API at {settings.TVDB_LEGACY_URL}")
    return LegacyTvdb(
        _resolve_api_key(settings, api_key),
        http_client,
        base_url=settings.TVDB_LEGACY_URL,
    )


@app.command()
def search(
    name: Annotated[Optional[str], typer.Argument(help="Series name")] = None,
    imdb: Annotated[
        Optional[str], typer.Option("--imdb", help="Search by IMDB ID instead")
    ] = None,
    api_key: API_KEY = None,
) -> None:
    """Search the JSON API for series by name or IMDB ID."""
    if name is None and imdb is None:
        raise typer.BadParameter("Give a series NAME or --imdb ID")
    with _reported_errors():
        result = _json_api(api_key).search(name=name, imdb_id=imdb)

    if not result.entries:
        console.print("[yellow]No series found.[/yellow]")
        return

    table = Table(title="TheTVDB series")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("First aired")
    table.add_column("Network")
    for entry in result.entries:
        table.add_row(
            str(entry.id) if entry.id is not None else "-",
            entry.series_name,
            entry.first_aired or "-",
            entry.network or "-",
        )
    console.print(table)


@app.command()
def episode(
    episode_id: Annotated[int, typer.Argument(help="TheTVDB episode ID")],
    api_key: API_KEY = None,
) -> None:
    """Show the name of an episode from the JSON API."""
    with _reported_errors():
        result = _json_api(api_key).episode(episode_id)
    if result.data is None:
        console.print(
            f"[yellow]No episode {episode_id}: {escape(str(result.errors))}[/yellow]"
        )
        raise typer.Exit(code=ExitCode.ERROR)
    console.print(f"[bold]{result.data.episode_name}[/bold]")


@app.command()
def episodes(
    series_id: Annotated[int, typer.Argument(help="TheTVDB series ID")],
    page: Annotated[int, typer.Option("--page", "-p", help="Page number")] = 1,
    api_key: API_KEY = None,
) -> None:
    """List one page of a series' episodes from the JSON API."""
    with _reported_errors():
        result = _json_api(api_key).series_episodes(series_id, page)

    table = Table(title=f"Series {series_id}, page {page}")
    table.add_column("Season", justify="right")
    table.add_column("Episode", justify="right")
    table.add_column("Name")
    for ep in result.data or []:
        table.add_row(
            str(ep.aired_season if ep.aired_season is not None else "-"),
            str(ep.aired_episode_number if ep.aired_episode_number is not None else "-"),
            ep.episode_name or "-",
        )
    console.print(table)
    if not result.is_last_page and result.links is not None:
        console.print(f"Next page: {result.links.next}")


@app.command()
def lookup(
    series: Annotated[str, typer.Argument(help="Series name")],
    season: Annotated[int, typer.Argument(help="Season number")],
    episode_number: Annotated[int, typer.Argument(help="Episode number")],
    lang: LANGUAGE = "en",
    api_key: API_KEY = None,
) -> None:
    """Find a series on the legacy API and print one episode's name."""
    with _reported_errors():
        api = _legacy_api(api_key)
        matches = api.search(series, lang)
        ep = api.episode(matches[0], season, episode_number)
    console.print(
        f"{matches[0].series_name} S{season:02d}E{episode_number:02d}: "
        f"[bold]{ep.episode_name}[/bold]"
    )


@app.command("set-key")
def set_key(key: Annotated[str, typer.Argument(help="TheTVDB API key")]) -> None:
    """Store the API key in the user config file."""
    config.set_api_key(key)
    info(f"Stored API key in {config.CONFIG_FILE}")
    console.print(f"API key saved to [bold]{config.CONFIG_FILE}[/bold]")


@app.command()
def version() -> None:
    """Show the version of tvdbclient."""
    from tvdbclient.__about__ import __version__

    console.print(f"tvdbclient version: [bold]{__version__}[/bold]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
