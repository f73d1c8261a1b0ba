"""Configuration file management for spendr."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from spendr.errors import ConfigError

DEFAULT_CURRENCY = "₹"


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "spendr" / "config.toml"


def get_default_store_path() -> Path:
    """Get the default expense store path (XDG compliant)."""
    return get_xdg_data_home() / "spendr" / "expenses.json"


@dataclass(frozen=True)
class Settings:
    """Resolved application settings."""

    store_path: Path
    currency: str = DEFAULT_CURRENCY


def default_config() -> dict[str, Any]:
    return {
        "storage": {"path": str(get_default_store_path())},
        "display": {"currency": DEFAULT_CURRENCY},
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config(), f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary, empty if the file doesn't exist.

    Raises:
        ConfigError: If the file can't be read or parsed.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return {}

    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Can't load config {config_path}: {e}") from e


def load_settings(config_path: Path | None = None, store_path: Path | None = None) -> Settings:
    """Resolve settings from the config file and defaults.

    Args:
        config_path: Path to config file. If None, uses default location.
        store_path: Explicit store path, overriding the config.

    Returns:
        Settings with every value filled in.

    Raises:
        ConfigError: If the config file is malformed.
    """
    config = load_config(config_path)

    storage = config.get("storage", {})
    display = config.get("display", {})
    if not isinstance(storage, dict) or not isinstance(display, dict):
        raise ConfigError("Config sections [storage] and [display] must be tables")

    if store_path is None:
        configured = storage.get("path")
        store_path = Path(configured).expanduser() if configured else get_default_store_path()

    currency = display.get("currency", DEFAULT_CURRENCY)
    if not isinstance(currency, str):
        raise ConfigError("display.currency must be a string")

    return Settings(store_path=store_path, currency=currency)
