#!/usr/bin/env python3
"""
dispatch - Run `gh workflow run` for each chosen workflow.

Best effort: workflows are dispatched one at a time, a failure is reported
and logged, and the next workflow is still attempted. Nothing is retried.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from ghdispatch import runner
from ghdispatch.colors import bold, cyan, green, red, yellow
from ghdispatch.log import SessionLogger
from ghdispatch.sources import path_from_label


@dataclass
class DispatchOutcome:
    label: str
    path: Optional[str]
    ok: bool
    error: Optional[str] = None


def dispatch_one(path: str, ref: str, cwd: Optional[Path] = None) -> None:
    """Dispatch a single workflow; gh's own output goes to the terminal.

    Raises CalledProcessError on a non-zero exit, OSError if gh cannot start.
    """
    subprocess.run(
        [runner.GH, "workflow", "run", path, "--ref", ref],
        cwd=cwd,
        check=True,
    )


def dispatch(chosen: Sequence[str], ref: str,
             logger: Optional[SessionLogger] = None,
             cwd: Optional[Path] = None) -> List[DispatchOutcome]:
    outcomes: List[DispatchOutcome] = []

    for label in chosen:
        path = path_from_label(label)
        if not path:
            print(yellow(f"  ⚠  Skipping '{label}': no workflow path"))
            if logger:
                logger.warning(f"Skipped {label!r}: no workflow path")
            outcomes.append(DispatchOutcome(label, None, False, "no workflow path"))
            continue

        print(f"\n  {cyan('▶')} Dispatching {bold(path)} on ref {bold(ref)}")
        try:
            dispatch_one(path, ref, cwd=cwd)
        except (subprocess.CalledProcessError, OSError) as e:
            error = _describe(e)
            print(red(f"  ❌  Dispatch failed for {path}: {error}"))
            if logger:
                logger.error(f"Dispatch failed for {path} on {ref}: {error}")
            outcomes.append(DispatchOutcome(label, path, False, error))
            continue

        print(green("  ✓  Dispatched."))
        if logger:
            logger.info(f"Dispatched {path} on {ref}")
        outcomes.append(DispatchOutcome(label, path, True))

    return outcomes


def _describe(error: Exception) -> str:
    if isinstance(error, subprocess.CalledProcessError):
        return f"gh exited with status {error.returncode}"
    return str(error)


def summarize(outcomes: Sequence[DispatchOutcome]) -> str:
    ok = sum(1 for o in outcomes if o.ok)
    failed = len(outcomes) - ok
    text = f"{ok} dispatched"
    if failed:
        text += f", {failed} failed"
    return text
