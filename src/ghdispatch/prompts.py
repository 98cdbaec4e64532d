"""Built-in prompt backend (InquirerPy) and the confirmation gate."""

from __future__ import annotations

import sys
from typing import Any, List, Optional, Sequence, Set

from InquirerPy import inquirer
from InquirerPy.base.control import Choice
from InquirerPy.separator import Separator

from ghdispatch.colors import grey, yellow
from ghdispatch.selection import (
    DONE,
    RESET,
    TOGGLE_VISIBLE,
    Visible,
    run_filter_loop,
)

TOGGLE_LABEL = "⏹ SELECT / UNSELECT ALL (visible)"


def _check_tty() -> bool:
    """Return True when running in an interactive terminal."""
    return sys.stdin.isatty() and sys.stdout.isatty()


def select_one_builtin(items: Sequence[str], label: str) -> Optional[int]:
    """Autocomplete prompt over `items`; returns the chosen index or None."""
    if not items:
        return None
    try:
        answer = inquirer.fuzzy(
            message=f"{label}:",
            choices=list(items),
            instruction="type to filter, Enter to choose",
            cycle=True,
        ).execute()
    except KeyboardInterrupt:
        return None
    if answer is None:
        return None
    try:
        return list(items).index(answer)
    except ValueError:
        return None


def ask_filter(label: str) -> Optional[str]:
    """Free-text filter with the two reserved commands offered as completions."""
    return inquirer.text(
        message=f"{label} - filter:",
        default="",
        instruction=f"(Enter = all, {DONE} to finish, {RESET} to clear)",
        completer={DONE: None, RESET: None},
    ).execute()


def ask_picks(label: str, visible: Visible, selected: Set[str]) -> Optional[List[Any]]:
    """Checkbox over the visible items, pre-checked from `selected`."""
    choices: List[Any] = [
        Choice(TOGGLE_VISIBLE, name=TOGGLE_LABEL),
        Separator(),
    ]
    for item, _ in visible:
        choices.append(Choice(item, name=item, enabled=item in selected))
    return inquirer.checkbox(
        message=f"{label}:",
        choices=choices,
        instruction="Space to toggle, Enter to confirm",
        transformer=lambda values: f"{len(values)} picked",
        cycle=True,
    ).execute()


def select_many_builtin(items: Sequence[str], label: str) -> List[int]:
    """Persistent filter/pick loop; returns the chosen indices."""
    if not items:
        return []
    print(grey(f"  Filter the list, pick, repeat. Type {DONE} when finished."))
    return run_filter_loop(
        items,
        ask_filter=lambda: ask_filter(label),
        ask_picks=lambda visible, selected: ask_picks(label, visible, selected),
        notify=lambda message: print(yellow(f"  {message}")),
    )


def _confirm_line(message: str) -> bool:
    try:
        answer = input(f"{message} (y/N) ")
    except (KeyboardInterrupt, EOFError):
        print()
        return False
    return answer.strip().lower() in ("y", "yes")


def confirm(message: str) -> bool:
    """Yes/no gate, default no. Falls back to a plain line reader off-TTY."""
    if not _check_tty():
        return _confirm_line(message)
    try:
        return bool(inquirer.confirm(message=message, default=False).execute())
    except KeyboardInterrupt:
        return False
    except Exception:
        # Prompt backend could not start (e.g. unsupported terminal)
        return _confirm_line(message)
