"""Shared fixtures: fake InquirerPy prompts and a clean tool cache."""

import pytest

from ghdispatch import runner


@pytest.fixture(autouse=True)
def clean_tool_cache():
    runner.reset_tool_cache()
    yield
    runner.reset_tool_cache()


class FakePrompt:
    """Stands in for an InquirerPy prompt; `execute()` replays one answer."""

    def __init__(self, answer):
        self.answer = answer

    def execute(self):
        if isinstance(self.answer, BaseException):
            raise self.answer
        return self.answer


class FakeInquirer:
    """Scripted replacement for `InquirerPy.inquirer`.

    Each prompt kind pops answers from its own queue; the keyword arguments
    of every call are recorded in `calls`.
    """

    def __init__(self, **answers):
        self.answers = {kind: list(values) for kind, values in answers.items()}
        self.calls = []

    def _next(self, kind, kwargs):
        self.calls.append((kind, kwargs))
        return FakePrompt(self.answers[kind].pop(0))

    def fuzzy(self, **kwargs):
        return self._next("fuzzy", kwargs)

    def text(self, **kwargs):
        return self._next("text", kwargs)

    def checkbox(self, **kwargs):
        return self._next("checkbox", kwargs)

    def confirm(self, **kwargs):
        return self._next("confirm", kwargs)


@pytest.fixture
def fake_inquirer(monkeypatch):
    """Factory installing a FakeInquirer into ghdispatch.prompts."""
    from ghdispatch import prompts

    def install(**answers):
        fake = FakeInquirer(**answers)
        monkeypatch.setattr(prompts, "inquirer", fake)
        return fake

    return install
