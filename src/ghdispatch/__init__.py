"""
ghdispatch - Interactive GitHub Actions workflow dispatcher.

Pick a branch or tag, pick any number of active workflows, confirm, and
ghdispatch runs `gh workflow run` for each of them against that ref.

Modules:
- runner: subprocess wrapper and tool detection
- sources: git refs and gh workflow listings
- selection: filter/select state for the multi-select prompt
- fzf / prompts / pickers: the two selection backends and their facade
- dispatch: sequential workflow dispatch
- cli: interactive session entry point
"""

__version__ = "0.1.0"
__author__ = "1minds3t"
__email__ = "1minds3t@proton.me"
__all__ = ["cli", "config", "dispatch", "pickers", "selection", "sources"]
