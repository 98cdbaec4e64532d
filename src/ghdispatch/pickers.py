"""Single/multi selection: fzf when installed, InquirerPy otherwise."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ghdispatch import prompts
from ghdispatch.fzf import Available, select_with_fzf


def select_one(items: Sequence[str], label: str, use_fzf: bool = True,
               fzf_args: Sequence[str] = ()) -> Optional[int]:
    """Index of the chosen item, or None if nothing was chosen."""
    if use_fzf:
        result = select_with_fzf(items, label, multi=False, extra_args=fzf_args)
        if isinstance(result, Available):
            return result.indices[0] if result.indices else None
    return prompts.select_one_builtin(items, label)


def select_many(items: Sequence[str], label: str, use_fzf: bool = True,
                fzf_args: Sequence[str] = ()) -> List[int]:
    """Indices of the chosen items; empty if nothing was chosen."""
    if use_fzf:
        result = select_with_fzf(items, label, multi=True, extra_args=fzf_args)
        if isinstance(result, Available):
            return list(result.indices)
    return prompts.select_many_builtin(items, label)
