"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from licenseaudit.deep_merge import deep_merge
from licenseaudit.errors import ConfigError

DEFAULT_CONFIG: dict[str, Any] = {
    "vendor_dir": "vendor",
    # cgo pseudo-package, never resolvable by go list
    "exclude_imports": ["C"],
    "go": {
        "binary": "go",
        "timeout": 600,
    },
    "resolver": {
        "vendor_root": "",
    },
    "templates": {
        "directory": None,
    },
    "report": {
        "confidence": 0.9,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as exc:
                msg = f"could not parse configuration {p}: {exc}"
                raise ConfigError(msg) from exc
            if not isinstance(user_config, dict):
                msg = f"configuration {p} must be a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
    return config
