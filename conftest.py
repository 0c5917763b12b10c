"""Configure pytest."""

import os
import sys
from pathlib import Path

import pytest

# Get the project root directory
root_dir = Path(__file__).parent

# Add src directory to Python path
src_path = str(root_dir / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

# Remove any duplicate paths
sys.path = list(dict.fromkeys(sys.path))

_ENV_PREFIXES = ("TVDB_", "TVDBCLIENT_")


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Path:
    """Keep tests away from real credentials, .env files and user config.

    Clears TVDB_* / TVDBCLIENT_* variables (kept when E2E tests are enabled),
    runs each test from an empty working directory and points the TOML config
    at it.
    """
    if not os.environ.get("TVDBCLIENT_E2E_TESTS"):
        for name in list(os.environ):
            if name.startswith(_ENV_PREFIXES):
                monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)

    from tvdbclient.utils import config

    config_dir = tmp_path / "config" / "tvdbclient"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_FILE", config_dir / "config.toml")
    return tmp_path
