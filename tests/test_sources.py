"""Tests for ref and workflow listing."""

import json

import pytest

from ghdispatch import runner
from ghdispatch.sources import (
    WorkflowListError,
    WorkflowRecord,
    fetch_workflows,
    list_refs,
    list_workflows,
    path_from_label,
)


@pytest.fixture
def fake_run(monkeypatch):
    """Replace runner.run with a canned output; records the calls."""
    calls = []

    def install(output):
        def run(command, args, cwd=None):
            calls.append((command, list(args)))
            return output
        monkeypatch.setattr(runner, "run", run)
        return calls

    return install


def test_list_refs_trims_and_drops_blanks(fake_run):
    calls = fake_run("main\n  feature/x \n\nv1.0\n")
    assert list_refs() == ["main", "feature/x", "v1.0"]
    assert calls == [("git", ["for-each-ref", "--format=%(refname:short)",
                              "refs/heads", "refs/tags"])]


def test_list_refs_empty(fake_run):
    fake_run("")
    assert list_refs() == []


def test_list_workflows_only_active(fake_run):
    calls = fake_run(json.dumps([
        {"name": "Deploy", "path": ".github/workflows/deploy.yml", "state": "active"},
        {"name": "Old", "path": ".github/workflows/old.yml", "state": "disabled_manually"},
        {"name": "Test", "path": ".github/workflows/test.yml", "state": "active"},
        None,
    ]))
    assert list_workflows() == [
        "Deploy — .github/workflows/deploy.yml",
        "Test — .github/workflows/test.yml",
    ]
    assert calls == [("gh", ["workflow", "list", "--limit", "500",
                             "--json", "name,path,state"])]


def test_fetch_workflows_limit(fake_run):
    calls = fake_run("[]")
    assert fetch_workflows(limit=20) == []
    assert calls[0][1][3] == "20"


@pytest.mark.parametrize("output", ["", "not json", "{\"name\": \"x\"}"])
def test_malformed_listing_raises(fake_run, output):
    fake_run(output)
    with pytest.raises(WorkflowListError):
        list_workflows()


def test_workflow_record_label():
    record = WorkflowRecord("CI", ".github/workflows/ci.yml", "active")
    assert record.is_active
    assert record.label == "CI — .github/workflows/ci.yml"
    assert path_from_label(record.label) == ".github/workflows/ci.yml"


def test_path_from_label_without_separator():
    assert path_from_label("just a name") is None
    assert path_from_label("Name — ") is None


def test_path_from_label_name_containing_separator():
    assert path_from_label("Build — Release — .github/workflows/r.yml") == ".github/workflows/r.yml"
