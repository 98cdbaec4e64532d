"""Tests for the dispatch orchestrator."""

import subprocess

import pytest

from ghdispatch import dispatch as dispatch_mod
from ghdispatch.dispatch import dispatch, summarize
from ghdispatch.log import SessionLogger

DEPLOY = "Deploy — .github/workflows/deploy.yml"
TEST = "Test — .github/workflows/test.yml"


@pytest.fixture
def gh_calls(monkeypatch):
    """Record `gh workflow run` calls; paths in `failing` exit non-zero."""
    calls = []
    failing = set()

    def run(cmd, **kwargs):
        calls.append(cmd)
        if cmd[3] in failing:
            raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(dispatch_mod.subprocess, "run", run)
    return calls, failing


def test_dispatches_each_workflow(gh_calls):
    calls, _ = gh_calls
    outcomes = dispatch([DEPLOY, TEST], "main")
    assert calls == [
        ["gh", "workflow", "run", ".github/workflows/deploy.yml", "--ref", "main"],
        ["gh", "workflow", "run", ".github/workflows/test.yml", "--ref", "main"],
    ]
    assert all(o.ok for o in outcomes)
    assert summarize(outcomes) == "2 dispatched"


def test_failure_does_not_stop_batch(gh_calls, tmp_path, capsys):
    calls, failing = gh_calls
    failing.add(".github/workflows/deploy.yml")
    logger = SessionLogger(log_dir=tmp_path)

    outcomes = dispatch([DEPLOY, TEST], "v1.0", logger=logger)
    logger.close()

    assert len(calls) == 2
    assert [o.ok for o in outcomes] == [False, True]
    assert outcomes[0].error == "gh exited with status 1"
    assert summarize(outcomes) == "1 dispatched, 1 failed"

    out = capsys.readouterr().out
    assert "Dispatch failed for .github/workflows/deploy.yml" in out
    errors = (tmp_path / "ghdispatch_errors.log").read_text()
    assert ".github/workflows/deploy.yml" in errors
    assert "test.yml" not in errors


def test_missing_gh_binary_is_reported(monkeypatch):
    def run(cmd, **kwargs):
        raise FileNotFoundError("gh")

    monkeypatch.setattr(dispatch_mod.subprocess, "run", run)
    outcomes = dispatch([DEPLOY], "main")
    assert not outcomes[0].ok


def test_label_without_path_is_skipped(gh_calls):
    calls, _ = gh_calls
    outcomes = dispatch(["no path here", TEST], "main")
    assert len(calls) == 1
    assert outcomes[0].path is None and not outcomes[0].ok
    assert outcomes[1].ok
