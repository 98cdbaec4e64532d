#!/usr/bin/env python3
"""
sources - Candidate refs (git) and dispatchable workflows (gh).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ghdispatch import runner
from ghdispatch.config import DEFAULT_WORKFLOW_LIMIT

LABEL_SEPARATOR = " — "


class WorkflowListError(Exception):
    pass


@dataclass(frozen=True)
class WorkflowRecord:
    name: str
    path: str
    state: str

    @property
    def is_active(self) -> bool:
        return self.state == "active"

    @property
    def label(self) -> str:
        return f"{self.name}{LABEL_SEPARATOR}{self.path}"


def path_from_label(label: str) -> Optional[str]:
    """Return the workflow path from a `<name> — <path>` label."""
    if LABEL_SEPARATOR not in label:
        return None
    path = label.rpartition(LABEL_SEPARATOR)[2].strip()
    return path or None


# ─────────────────────────────────────────────────────────────
# git refs
# ─────────────────────────────────────────────────────────────

def list_refs(cwd: Optional[Path] = None) -> List[str]:
    """Short names of all local branches and tags, in git's order."""
    raw = runner.run(
        runner.GIT,
        ["for-each-ref", "--format=%(refname:short)", "refs/heads", "refs/tags"],
        cwd=cwd,
    )
    return [line.strip() for line in raw.splitlines() if line.strip()]


# ─────────────────────────────────────────────────────────────
# gh workflows
# ─────────────────────────────────────────────────────────────

def fetch_workflows(limit: int = DEFAULT_WORKFLOW_LIMIT,
                    cwd: Optional[Path] = None) -> List[WorkflowRecord]:
    """All workflow records reported by `gh workflow list`.

    Raises WorkflowListError when the output is not a JSON array. A failing
    `gh` produces empty output, which is reported the same way.
    """
    raw = runner.run(
        runner.GH,
        ["workflow", "list", "--limit", str(limit), "--json", "name,path,state"],
        cwd=cwd,
    )
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise WorkflowListError(str(e)) from e
    if not isinstance(data, list):
        raise WorkflowListError(f"expected a JSON array, got {type(data).__name__}")

    records = []
    for entry in data:
        if not isinstance(entry, dict):
            continue
        records.append(WorkflowRecord(
            name=str(entry.get("name", "")),
            path=str(entry.get("path", "")),
            state=str(entry.get("state", "")),
        ))
    return records


def list_workflows(limit: int = DEFAULT_WORKFLOW_LIMIT,
                   cwd: Optional[Path] = None) -> List[str]:
    """Labels of the active workflows, in listing order."""
    return [r.label for r in fetch_workflows(limit, cwd) if r.is_active]
