#!/usr/bin/env python3
"""
runner - Synchronous subprocess helpers.

`run` captures stdout and turns every failure into an empty string, so an
empty result means "no data", not necessarily "tool missing". `has_tool`
answers the latter, once per tool per process.
"""

import subprocess
from pathlib import Path
from typing import Dict, Optional, Sequence

GIT = "git"
GH = "gh"
FZF = "fzf"

_tool_cache: Dict[str, bool] = {}


def run(command: str, args: Sequence[str], cwd: Optional[Path] = None) -> str:
    """Run `command args...`; return stdout, or "" on any failure."""
    try:
        result = subprocess.run(
            [command, *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return ""
    return result.stdout


def has_tool(command: str) -> bool:
    """True if `command --version` succeeds. Cached for the session."""
    if command in _tool_cache:
        return _tool_cache[command]
    try:
        subprocess.run(
            [command, "--version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=True,
        )
        available = True
    except (OSError, subprocess.CalledProcessError):
        available = False
    _tool_cache[command] = available
    return available


def reset_tool_cache() -> None:
    _tool_cache.clear()
