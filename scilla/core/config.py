"""Configuration file location, presets and TOML read/write."""

import os
import sys
import tomllib
from pathlib import Path
from typing import Any

import tomlkit

from scilla.core.errors import ConfigDirError, ConfigIOError, ParseError
from scilla.core.logging_config import get_logger

log = get_logger(__name__)

CONFIG_FILE_NAME = "scilla.toml"

RPC_PRESETS = {
    "Devnet": "https://api.devnet.solana.com",
    "Testnet": "https://api.testnet.solana.com",
    "Mainnet-Beta": "https://api.mainnet-beta.solana.com",
}
CUSTOM_RPC = "Custom"

DEFAULT_KEYPAIR_PATH = "~/.config/solana/id.json"
COMMITMENT_LEVELS = ["confirmed", "finalized", "processed"]

EDITOR_ENV = "EDITOR"
DEFAULT_EDITOR = "nano"

# Keys written by dump_config, in file order
RPC_URL_KEY = "rpc-url"
KEYPAIR_PATH_KEY = "keypair-path"
COMMITMENT_LEVEL_KEY = "commitment-level"


def _home_dir() -> Path:
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as e:
        raise ConfigDirError(f"Cannot determine home directory: {e}") from e
    if not str(home) or str(home) == "~":
        raise ConfigDirError("Cannot determine home directory")
    return home


def get_config_dir() -> Path:
    """Return the per-user configuration directory for this platform."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg and os.path.isabs(xdg):
        return Path(xdg)

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return _home_dir() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return _home_dir() / "Library" / "Application Support"
    return _home_dir() / ".config"


def get_config_path() -> Path:
    """Get the configuration file path."""
    return get_config_dir() / CONFIG_FILE_NAME


def load_config(path: Path) -> dict[str, Any]:
    """Parse the TOML file at ``path`` into a plain mapping."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ParseError(path, e) from e
    except OSError as e:
        raise ConfigIOError(path, e) from e


def dump_config(rpc_url: str, keypair_path: str, commitment_level: str) -> str:
    """Render the three settings as a TOML document, one line per key."""
    doc = tomlkit.document()
    doc.add(RPC_URL_KEY, rpc_url)
    doc.add(KEYPAIR_PATH_KEY, keypair_path)
    doc.add(COMMITMENT_LEVEL_KEY, commitment_level)
    return tomlkit.dumps(doc)


def save_config(path: Path, content: str) -> None:
    """Write ``content`` to ``path``, replacing the file and creating parents."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise ConfigIOError(path, e) from e
    log.info("Wrote config to %s", path)


def format_value(value: Any) -> str:
    """Render a TOML value for display, without surrounding quotes."""
    if isinstance(value, str):
        return value.strip('"')
    if isinstance(value, bool):
        return "true" if value else "false"
    return tomlkit.item(value).as_string().strip().strip('"')
