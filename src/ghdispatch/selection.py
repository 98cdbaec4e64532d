#!/usr/bin/env python3
"""
selection - Filter/select state for the built-in multi-select prompt.

The checkbox prompt only ever shows the items matching the current filter,
so the operator's overall choice is kept here as a set of display strings
and only the visible slice is reconciled after each pick round:

  filter  →  visible subset  →  pick  →  apply_picks  →  filter …

The loop ends on `:done` (result = indices of selected items) or on an
interrupt in either prompt (result = nothing). `:reset` clears the set.

Everything in this module is free of terminal I/O; the prompts are passed in.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Sequence, Set, Tuple

DONE = ":done"
RESET = ":reset"


class _ToggleVisible:
    def __repr__(self) -> str:
        return "TOGGLE_VISIBLE"


# Value of the synthetic "select / unselect all visible" entry.
TOGGLE_VISIBLE = _ToggleVisible()

Visible = List[Tuple[str, int]]


def visible_subset(items: Sequence[str], query: str) -> Visible:
    """(item, original index) pairs whose text contains `query`, ignoring case."""
    needle = query.lower()
    return [(item, i) for i, item in enumerate(items) if needle in item.lower()]


def apply_picks(selected: Set[str], visible: Visible, picks: Iterable[Any]) -> Set[str]:
    """Return the selection after one pick round.

    - toggle only: if every visible item is selected, unselect them all,
      otherwise select them all
    - toggle plus items: the visible slice becomes exactly those items
    - no toggle: the visible slice becomes exactly the picked items
    """
    picks = list(picks)
    toggled = any(p is TOGGLE_VISIBLE for p in picks)
    others = [p for p in picks if p is not TOGGLE_VISIBLE]
    visible_items = {item for item, _ in visible}
    explicit = {p for p in others if p in visible_items}
    remaining = set(selected) - visible_items

    if toggled and not others:
        if visible_items <= selected:
            return remaining
        return remaining | visible_items

    # Toggle submitted alongside items is treated as a plain explicit pick.
    return remaining | explicit


def resolve_indices(items: Sequence[str], selected: Set[str]) -> List[int]:
    """Ascending indices of `items` whose text is in `selected`."""
    return [i for i, item in enumerate(items) if item in selected]


def run_filter_loop(
    items: Sequence[str],
    ask_filter: Callable[[], Optional[str]],
    ask_picks: Callable[[Visible, Set[str]], Optional[Iterable[Any]]],
    notify: Callable[[str], None] = print,
) -> List[int]:
    """Run filter/pick rounds until `:done`; return the chosen indices.

    `ask_filter()` returns the raw filter text. `ask_picks(visible, selected)`
    returns the submitted values (display strings and/or TOGGLE_VISIBLE).
    A None return or an interrupt from either aborts with an empty result.
    """
    selected: Set[str] = set()

    while True:
        try:
            raw = ask_filter()
        except (KeyboardInterrupt, EOFError):
            return []
        if raw is None:
            return []

        command = raw.strip()
        if command == DONE:
            return resolve_indices(items, selected)
        if command == RESET:
            selected = set()
            notify("Selection cleared.")
            continue

        visible = visible_subset(items, raw)
        if not visible:
            notify(f"No match for '{raw}'.")
            continue

        try:
            picks = ask_picks(visible, set(selected))
        except (KeyboardInterrupt, EOFError):
            return []
        if picks is None:
            return []

        selected = apply_picks(selected, visible, picks)
        notify(f"{len(selected)} of {len(items)} selected.")
