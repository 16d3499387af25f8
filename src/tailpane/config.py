"""Configuration management for tailpane.

Handles tail pane policy from the [default] table of tailpane.toml.
Invalid values are rejected when the file is loaded, never at runtime.
"""

from pathlib import Path
from typing import Any, Optional
import tomllib

from .errors import ConfigError
from .types import TailConfig

CONFIG_FILENAME = "tailpane.toml"

_BOOL_KEYS = ("erase_on_update", "audible", "raise_on_update", "drop_on_exit", "unsplittable")


def _find_config_file() -> Optional[Path]:
    """Find tailpane.toml in current or parent directories."""
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / CONFIG_FILENAME
        if config_file.exists():
            return config_file

    return None


def _load_config(path: Optional[Path] = None) -> dict:
    """Load raw configuration from file."""
    if path is None:
        path = _find_config_file()

    if path is None or not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e


def _require_int(key: str, value: Any, minimum: int) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigError(f"{key} must be >= {minimum}, got {value}")
    return value


def _parse_dismiss_delay(value: Any) -> float | None:
    """Parse dismiss_delay: seconds, or false/0 to disable."""
    if value is False:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"dismiss_delay must be a number of seconds or false, got {value!r}")
    if value < 0:
        raise ConfigError(f"dismiss_delay must be >= 0, got {value}")
    return float(value) or None


def parse_tail_config(data: dict) -> TailConfig:
    """Build a TailConfig from a [default] table.

    Args:
        data: Raw table contents

    Returns:
        Validated TailConfig

    Raises:
        ConfigError: If a value has the wrong type or range, or a key is unknown
    """
    known = set(TailConfig.__dataclass_fields__)
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(unknown)}")

    values: dict[str, Any] = {}

    for key in _BOOL_KEYS:
        if key in data:
            if not isinstance(data[key], bool):
                raise ConfigError(f"{key} must be true or false, got {data[key]!r}")
            values[key] = data[key]

    if "dismiss_delay" in data:
        values["dismiss_delay"] = _parse_dismiss_delay(data["dismiss_delay"])
    if "max_height" in data:
        values["max_height"] = _require_int("max_height", data["max_height"], 1)
    if "scrollback" in data:
        values["scrollback"] = _require_int("scrollback", data["scrollback"], 0)

    if "special_display" in data:
        names = data["special_display"]
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ConfigError("special_display must be a list of strings")
        values["special_display"] = frozenset(names)

    if "target_window" in data:
        if not isinstance(data["target_window"], str) or not data["target_window"]:
            raise ConfigError("target_window must be a non-empty string")
        values["target_window"] = data["target_window"]

    return TailConfig(**values)


class ConfigManager:
    """Manages configuration for tailpane."""

    def __init__(self, path: Optional[Path] = None):
        self._config_file = path or _find_config_file()
        self.data = _load_config(self._config_file)

        default = self.data.get("default", {})
        if not isinstance(default, dict):
            raise ConfigError("[default] must be a table")
        self.tail_config = parse_tail_config(default)

    @property
    def config_file(self) -> Optional[Path]:
        return self._config_file


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def get_tail_config() -> TailConfig:
    """Get the tail pane policy."""
    return get_config_manager().tail_config
