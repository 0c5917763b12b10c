"""Config utility for persistent tvdbclient settings (API key, etc.).

Provides functions to read and write the TheTVDB API key to
~/.config/tvdbclient/config.toml. Uses tomli/tomli-w for TOML parsing and
writing.
"""

import contextlib
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import tomli
import tomli_w

# Determine config directory respecting XDG_CONFIG_HOME if set.
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
# Path like ~/.config/tvdbclient or $XDG_CONFIG_HOME/tvdbclient
CONFIG_DIR = _xdg_config_home / "tvdbclient"
CONFIG_FILE = CONFIG_DIR / "config.toml"


def set_api_key(key: str) -> None:
    """Store the TheTVDB API key in config.toml.

    Args:
        key (str): The API key to persist.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    data = _read_config_file()
    if "tvdb" not in data:
        data["tvdb"] = {}
    data["tvdb"]["api_key"] = key
    with CONFIG_FILE.open("wb") as f:
        tomli_w.dump(data, f)


# ---------------------------------------------------------------------------
# Generic configuration resolution
# ---------------------------------------------------------------------------

T = TypeVar("T")


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""

    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve a nested value from *data* given a dotted key path.

    Example: dotted_key="tvdb.api_key" will attempt
    ``data["tvdb"]["api_key"]`` returning None if any level is missing.
    """

    keys = dotted_key.split(".")
    current: Any = data
    for part in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = "TVDBCLIENT_") -> str:
    """Convert a dotted key path to an uppercase ENV var name.

    Example: "tvdb.api_key" -> "TVDBCLIENT_TVDB_API_KEY".
    """

    return prefix + dotted_key.replace(".", "_").upper()


def _coerce(value: Any, default: T) -> T:
    """Best-effort conversion of *value* to the type of *default*.

    A ``None`` default leaves the value untouched, so digit-only API keys stay
    strings.
    """
    if isinstance(default, bool):
        if isinstance(value, str):
            return cast(T, value.lower() in {"1", "true", "yes", "on"})
        return cast(T, bool(value))
    if isinstance(default, float):
        with contextlib.suppress(TypeError, ValueError):
            return cast(T, float(value))
        return default
    if isinstance(default, int):
        with contextlib.suppress(TypeError, ValueError):
            return cast(T, int(value))
        return default
    return cast(T, value)


def resolve_setting(
    key: str,
    *,
    default: T,
    cli_value: T | None = None,
) -> T:
    """Resolve a configuration *key* using precedence CLI > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"tvdb.api_key"`` or ``"timeout"``.
        default: Value to fall back to when no overrides found.
        cli_value: Value passed from CLI option (may be ``None`` when not provided).

    Returns:
        The resolved value with type matching *default* (or *cli_value*).
    """

    # 1. CLI value wins if provided (and not ``None`` to mimic Typer semantics).
    if cli_value is not None:
        return cli_value

    # 2. Environment variable
    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        return _coerce(os.environ[env_var], default)

    # 3. Config file lookup
    file_val = _lookup_nested(_read_config_file(), key)
    if file_val is not None:
        return _coerce(file_val, default)

    # 4. Default
    return default
