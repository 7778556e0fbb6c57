"""Configuration loader for synonomous.

Defaults come from a JSON file when one is named explicitly (argument or
SYNONOMOUS_CONFIG environment variable), with hardcoded fallbacks.

Example config file:
    {"defaults": {"transformations": ["verbatim", "toAllCaps"], "prop_path": "style"}}
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SYNONOMOUS_CONFIG"

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "transformations": ["verbatim", "toCamelCase"],
    "prop_path": "name",
    "dict_path": "",
}

_config: dict[str, Any] | None = None


def _find_config(path: Optional[Path | str] = None) -> Path | None:
    """Resolve the config file from the argument or the environment."""
    candidate = path or os.environ.get(CONFIG_ENV_VAR)
    if candidate:
        candidate = Path(candidate)
        if candidate.exists():
            return candidate
        logger.warning("Config file not found: %s", candidate)
    return None


def load(path: Optional[Path | str] = None) -> dict[str, Any]:
    """Load configuration from a JSON file or use fallbacks.

    The result is cached; pass `path` (or call reset()) to reload.
    """
    global _config
    if _config is not None and path is None:
        return _config

    config_path = _find_config(path)
    if config_path:
        try:
            with open(config_path) as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", config_path, e)

    # Fallback
    _config = {"defaults": dict(FALLBACK_DEFAULTS)}
    return _config


def reset() -> None:
    """Forget the cached configuration."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_transformations() -> list[str]:
    return list(get_default("transformations", FALLBACK_DEFAULTS["transformations"]))


def default_prop_path() -> str | list[str]:
    return get_default("prop_path", FALLBACK_DEFAULTS["prop_path"])


def default_dict_path() -> str | list[str]:
    return get_default("dict_path", FALLBACK_DEFAULTS["dict_path"])
