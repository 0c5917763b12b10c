"""Tests for the tvdbclient CLI commands.

The CLI builds real clients, so HTTP is stubbed with respx using the same
fixtures as the client tests. Covers:
- JSON API commands (search, episode, episodes) with an explicit --api-key
- the legacy lookup command
- API key resolution from the config file written by set-key
- error reporting and exit codes
"""

import logging

import httpx
import pytest
import respx
from typer.testing import CliRunner

from tests.helpers.fake_transport import load_fixture
from tvdbclient.__about__ import __version__
from tvdbclient.cli.commands import ExitCode, app
from tvdbclient.utils import config

API = "https://api.thetvdb.com"
LEGACY = "http://thetvdb.com/api"

runner = CliRunner()


@pytest.fixture
def logged_in(respx_mock: respx.MockRouter) -> respx.MockRouter:
    respx_mock.post(f"{API}/login").mock(
        return_value=httpx.Response(200, json={"token": "dummy-jwt-token"})
    )
    return respx_mock


def test_search_prints_table(logged_in: respx.MockRouter) -> None:
    route = logged_in.get(f"{API}/search/series", params={"name": "scrubs"}).mock(
        return_value=httpx.Response(200, text=load_fixture("search_scrubs.json"))
    )
    result = runner.invoke(app, ["search", "scrubs", "--api-key", "KEY"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Scrubs" in result.output
    assert "76156" in result.output
    assert route.calls.last.request.headers["Authorization"] == "Bearer dummy-jwt-token"


def test_search_by_imdb(logged_in: respx.MockRouter) -> None:
    logged_in.get(f"{API}/search/series", params={"imdbId": "tt0285403"}).mock(
        return_value=httpx.Response(200, text=load_fixture("search_scrubs.json"))
    )
    result = runner.invoke(app, ["search", "--imdb", "tt0285403", "-k", "KEY"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Scrubs" in result.output


def test_search_no_results(logged_in: respx.MockRouter) -> None:
    logged_in.get(f"{API}/search/series").mock(
        return_value=httpx.Response(200, json={"data": []})
    )
    result = runner.invoke(app, ["search", "nothing", "-k", "KEY"])
    assert result.exit_code == ExitCode.SUCCESS
    assert "No series found." in result.output


def test_search_needs_name_or_imdb() -> None:
    result = runner.invoke(app, ["search", "-k", "KEY"])
    assert result.exit_code != ExitCode.SUCCESS


def test_missing_api_key_is_reported() -> None:
    result = runner.invoke(app, ["search", "scrubs"])
    assert result.exit_code == ExitCode.ERROR
    assert "Missing required API key" in result.output


def test_key_from_config_file(logged_in: respx.MockRouter) -> None:
    """set-key persists the key and later commands pick it up."""
    logged_in.get(f"{API}/search/series").mock(
        return_value=httpx.Response(200, json={"data": []})
    )
    saved = runner.invoke(app, ["set-key", "stored-key"])
    assert saved.exit_code == ExitCode.SUCCESS
    assert config.CONFIG_FILE.exists()

    result = runner.invoke(app, ["search", "scrubs"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    login = logged_in.calls[0].request
    assert b"stored-key" in login.content


def test_login_failure_exits_with_error(respx_mock: respx.MockRouter) -> None:
    respx_mock.post(f"{API}/login").mock(return_value=httpx.Response(401))
    result = runner.invoke(app, ["search", "scrubs", "-k", "BAD"])
    assert result.exit_code == ExitCode.ERROR
    assert "Communication error" in result.output


def test_episode(logged_in: respx.MockRouter) -> None:
    logged_in.get(f"{API}/episodes/184603").mock(
        return_value=httpx.Response(200, text=load_fixture("episode_184603.json"))
    )
    result = runner.invoke(app, ["episode", "184603", "-k", "KEY"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "My Mentor" in result.output


def test_episode_without_data(logged_in: respx.MockRouter) -> None:
    logged_in.get(f"{API}/episodes/1").mock(
        return_value=httpx.Response(
            200, json={"errors": {"invalidLanguage": ["No translation"]}}
        )
    )
    result = runner.invoke(app, ["episode", "1", "-k", "KEY"])
    assert result.exit_code == ExitCode.ERROR
    assert "No episode 1" in result.output


def test_episodes_page(logged_in: respx.MockRouter) -> None:
    logged_in.get(f"{API}/series/76156/episodes", params={"page": "1"}).mock(
        return_value=httpx.Response(
            200, text=load_fixture("series_episodes_76156_page1.json")
        )
    )
    result = runner.invoke(app, ["episodes", "76156", "-k", "KEY"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "My First Day" in result.output
    assert "Next page: 2" in result.output


def test_lookup_legacy(respx_mock: respx.MockRouter) -> None:
    respx_mock.get(f"{LEGACY}/GetSeries.php").mock(
        return_value=httpx.Response(200, text=load_fixture("legacy_search_scrubs.xml"))
    )
    respx_mock.get(f"{LEGACY}/KEY/series/76156/default/1/2/en.xml").mock(
        return_value=httpx.Response(
            200, text=load_fixture("legacy_episode_76156_1_2.xml")
        )
    )
    result = runner.invoke(app, ["lookup", "Scrubs", "1", "2", "-k", "KEY"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Scrubs S01E02" in result.output
    assert "My Mentor" in result.output


def test_lookup_series_not_found(respx_mock: respx.MockRouter) -> None:
    respx_mock.get(f"{LEGACY}/GetSeries.php").mock(
        return_value=httpx.Response(200, text="<Data></Data>")
    )
    result = runner.invoke(app, ["lookup", "Nope", "1", "1", "-k", "KEY"])
    assert result.exit_code == ExitCode.ERROR
    assert "Series not found: Nope" in result.output


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == ExitCode.SUCCESS
    assert __version__ in result.output


def test_debug_flag_enables_request_logging() -> None:
    logger = logging.getLogger("tvdbclient")
    level = logger.level
    try:
        result = runner.invoke(app, ["--debug", "version"])
        assert result.exit_code == ExitCode.SUCCESS
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(level)
