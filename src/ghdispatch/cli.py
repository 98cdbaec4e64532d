#!/usr/bin/env python3
"""
ghdispatch - Interactive GitHub Actions workflow dispatcher

Runs one interactive session: pick a branch/tag, pick workflows, confirm,
dispatch. Requires `git` and `gh`; uses `fzf` for picking when installed.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from ghdispatch import __version__, pickers, prompts, runner, sources
from ghdispatch.colors import bold, cyan, green, grey, red, yellow
from ghdispatch.config import DEFAULT_WORKFLOW_LIMIT, load_config
from ghdispatch.dispatch import dispatch, summarize
from ghdispatch.log import SessionLogger

REQUIRED_TOOLS = {
    runner.GIT: "git not found in PATH",
    runner.GH: "gh (GitHub CLI) not found in PATH — https://cli.github.com",
}


def run_session(repo_path: Optional[Path] = None,
                config: Optional[Dict[str, Any]] = None,
                logger: Optional[SessionLogger] = None) -> int:
    """Run the full interactive flow; return the process exit code."""
    if config is None:
        config = load_config()

    for tool, message in REQUIRED_TOOLS.items():
        if not runner.has_tool(tool):
            print(red(f"❌  {message}"), file=sys.stderr)
            return 1

    if logger is not None:
        return _interactive_session(repo_path, config, logger)

    log_dir = config.get("log_dir")
    logger = SessionLogger(log_dir=Path(log_dir).expanduser() if log_dir else None)
    try:
        return _interactive_session(repo_path, config, logger)
    finally:
        logger.close()


def _interactive_session(repo_path: Optional[Path], config: Dict[str, Any],
                         logger: SessionLogger) -> int:
    """Ref pick, workflow pick, confirm, dispatch."""
    use_fzf = config.get("use_fzf", True)
    fzf_args = config.get("fzf_args", [])

    # 1) refs
    refs = sources.list_refs(cwd=repo_path)
    if not refs:
        print(yellow("No git refs found."))
        return 0

    ref_idx = pickers.select_one(refs, "Select branch/tag", use_fzf, fzf_args)
    if ref_idx is None:
        print(yellow("No selection."))
        return 0
    selected_ref = refs[ref_idx]
    print(f"Selected ref: {bold(selected_ref)}")
    logger.info(f"Selected ref {selected_ref}")

    # 2) workflows
    try:
        limit = config.get("workflow_limit", DEFAULT_WORKFLOW_LIMIT)
        workflows = sources.list_workflows(limit, cwd=repo_path)
    except sources.WorkflowListError as e:
        print(red(f"Failed to parse `gh workflow list` output: {e}"), file=sys.stderr)
        logger.error(f"Workflow listing unparsable: {e}")
        return 0
    if not workflows:
        print(yellow("No active workflows found."))
        return 0

    chosen_idx = pickers.select_many(workflows, "Select workflows to dispatch",
                                     use_fzf, fzf_args)
    chosen = [workflows[i] for i in chosen_idx if 0 <= i < len(workflows)]
    if not chosen:
        print(yellow("No workflows selected. Exiting."))
        return 0

    print(f"\n{bold('Will dispatch the following workflows:')}")
    for label in chosen:
        print(f"  {grey('-')} {label}")
    print(f"  {grey('on ref')} {cyan(selected_ref)}\n")

    if not prompts.confirm("Proceed and dispatch workflows?"):
        print(yellow("Cancelled by user."))
        logger.info("Dispatch cancelled at confirmation")
        return 0

    # 3) dispatch
    outcomes = dispatch(chosen, selected_ref, logger=logger, cwd=repo_path)
    summary = summarize(outcomes)
    print(f"\n{green('All done.')} {grey(summary)}")
    logger.info(f"Session finished: {summary}")
    return 0


def main():
    """Main entry point for the ghdispatch CLI."""
    parser = argparse.ArgumentParser(
        description="ghdispatch - pick a git ref and dispatch GitHub Actions workflows on it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ghdispatch                 # Interactive session in current directory
  ghdispatch -r ~/myproject  # Run against a specific repository

Multi-select without fzf:
  type a filter (Enter = all), tick items, repeat with other filters;
  :reset clears the selection, :done finishes.
        """
    )

    parser.add_argument(
        '-r', '--repo',
        type=str,
        default=None,
        help='Path to git repository (default: current directory)'
    )

    parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'ghdispatch {__version__}'
    )

    args = parser.parse_args()

    repo_path = Path(args.repo).expanduser().resolve() if args.repo else None

    try:
        code = run_session(repo_path)
    except KeyboardInterrupt:
        print("\nCancelled.")
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    main()
