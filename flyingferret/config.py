"""
Config loader for flyingferret.
Reads config.yaml once at startup. All other modules import from here.
If the default config.yaml is missing the built-in DEFAULTS are used, so
the library and CLI work without any file on disk.
"""

import copy
import os
import re
import yaml
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

_CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"

DEFAULTS: dict = {
    "server": {"host": "0.0.0.0", "port": 8000},
    "logging": {"level": "INFO", "file": None},
    "responder": {"seed": None},
    "client": {"url": "http://localhost:8000", "timeout": 10},
}

_config: dict | None = None


def _resolve_env_vars(value: str) -> str:
    """Replace ${ENV_VAR} patterns with actual environment variable values."""
    def replacer(match):
        var_name = match.group(1)
        return os.environ.get(var_name, "")
    return re.sub(r"\$\{(\w+)\}", replacer, value)


def _walk_and_resolve(obj):
    """Recursively resolve env vars in all string values."""
    if isinstance(obj, dict):
        return {k: _walk_and_resolve(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_walk_and_resolve(v) for v in obj]
    elif isinstance(obj, str):
        return _resolve_env_vars(obj)
    return obj


def _merge(base: dict, override: dict) -> dict:
    """Overlay override onto a copy of base, one level of sections deep."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path: Path | None = None) -> dict:
    """Load and cache config from YAML file."""
    global _config
    if _config is not None:
        return _config

    config_path = path or _CONFIG_PATH
    if not config_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config not found: {config_path}")
        _config = copy.deepcopy(DEFAULTS)
        return _config

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    _config = _merge(DEFAULTS, _walk_and_resolve(raw))
    return _config


def get_config() -> dict:
    """Return cached base config, loading if necessary."""
    if _config is None:
        return load_config()
    return _config


def reset_config():
    """Forget the cached config so the next get_config() reloads it."""
    global _config
    _config = None
