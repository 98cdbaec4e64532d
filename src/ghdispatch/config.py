#!/usr/bin/env python3
"""
config - Configuration management for ghdispatch.

Holds user preferences such as whether to use fzf, extra fzf arguments,
the workflow listing limit and where log files go. Selections are never
stored here; every session starts from scratch.
"""

import json
import os
from pathlib import Path
from typing import Dict, Any


DEFAULT_WORKFLOW_LIMIT = 500


def default_config() -> Dict[str, Any]:
    """Return a fresh copy of the default settings."""
    return {
        "use_fzf": True,
        "fzf_args": [],
        "workflow_limit": DEFAULT_WORKFLOW_LIMIT,
        "log_dir": None,
    }


def get_config_dir() -> Path:
    """Get the ghdispatch configuration directory."""
    override = os.environ.get("GHDISPATCH_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".ghdispatch"


def get_config_file() -> Path:
    """Get the path to the configuration file."""
    return get_config_dir() / "config.json"


def load_config() -> Dict[str, Any]:
    """Load configuration from file, merged over the defaults."""
    config = default_config()
    config_file = get_config_file()

    if not config_file.exists():
        return config

    try:
        with open(config_file, 'r') as f:
            stored = json.load(f)
    except (OSError, ValueError):
        # Unreadable or invalid file: run with defaults
        return config

    if not isinstance(stored, dict):
        return config

    for key, value in stored.items():
        if key in config:
            config[key] = value

    # Coerce values a hand-edited file might get wrong
    if not isinstance(config["fzf_args"], list):
        config["fzf_args"] = []
    try:
        config["workflow_limit"] = int(config["workflow_limit"])
    except (TypeError, ValueError):
        config["workflow_limit"] = DEFAULT_WORKFLOW_LIMIT
    config["use_fzf"] = bool(config["use_fzf"])
    return config
