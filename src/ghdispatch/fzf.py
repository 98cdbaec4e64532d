#!/usr/bin/env python3
"""
fzf - Selection through an external fzf process.

Items go to fzf's stdin as `<1-based index>\\t<label>` lines (only the label
is shown) and the chosen lines come back on stdout in the same format. fzf
draws its UI on the terminal directly; stderr is inherited.

The result is tagged: `Available(indices)` when fzf ran (an empty tuple means
the operator picked nothing or pressed Esc), `UNAVAILABLE` when fzf is not
installed and the caller should use the built-in prompts instead.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from ghdispatch import runner
from ghdispatch.colors import yellow
from ghdispatch.config import get_config_file


@dataclass(frozen=True)
class Available:
    indices: Tuple[int, ...] = ()


@dataclass(frozen=True)
class Unavailable:
    pass


UNAVAILABLE = Unavailable()

FZF_ERROR = 2

FzfResult = Union[Available, Unavailable]


def build_input(items: Sequence[str]) -> str:
    return "\n".join(f"{i}\t{item}" for i, item in enumerate(items, start=1))


def build_command(label: str, multi: bool = False,
                  extra_args: Sequence[str] = ()) -> List[str]:
    cmd = [
        runner.FZF,
        "--prompt", f"{label}: ",
        "--layout=reverse",
        "--delimiter", "\t",
        "--with-nth", "2..",
    ]
    if multi:
        cmd += ["--multi", "--bind", "ctrl-a:toggle-all"]
    cmd += list(extra_args)
    return cmd


def parse_output(output: str, count: int) -> Tuple[int, ...]:
    """Zero-based indices from fzf output lines; junk and out-of-range dropped."""
    indices = []
    for line in output.splitlines():
        token = line.split("\t", 1)[0].strip()
        if not token.isdigit():
            continue
        idx = int(token) - 1
        if 0 <= idx < count and idx not in indices:
            indices.append(idx)
    return tuple(indices)


def select_with_fzf(items: Sequence[str], label: str, multi: bool = False,
                    extra_args: Sequence[str] = ()) -> FzfResult:
    if not runner.has_tool(runner.FZF):
        return UNAVAILABLE
    if not items:
        return Available(())

    try:
        result = subprocess.run(
            build_command(label, multi, extra_args),
            input=build_input(items),
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError:
        return UNAVAILABLE

    if result.returncode == FZF_ERROR:
        # fzf rejected its arguments; let the built-in prompt take over
        print(yellow(f"  ⚠  fzf exited with an error; check fzf_args in {get_config_file()}"))
        return UNAVAILABLE

    # 1 = no match, 130 = Esc / Ctrl-C; both leave stdout empty
    indices = parse_output(result.stdout or "", len(items))
    if not multi:
        indices = indices[:1]
    return Available(indices)
