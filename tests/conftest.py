"""Shared fixtures: a recording gcloud runner and scripted prompts."""

import json

import pytest

from deployzzz import config, display, prompts
from deployzzz.runner import GCloudRunner, set_runner
from deployzzz.types import GCloudError


class RecordingRunner(GCloudRunner):
    """A runner that records every invocation and replies with canned output.

    Responses are matched by argument prefix, first match wins. Commands with
    no matching response succeed with empty output.
    """

    def __init__(self):
        super().__init__("gcloud")
        self.calls = []
        self._responses = []

    def respond(self, prefix, output="", error=None):
        self._responses.append((list(prefix), output, error))

    def respond_json(self, prefix, data):
        self.respond(prefix, json.dumps(data))

    def fail(self, prefix, message="permission denied"):
        self.respond(prefix, error=GCloudError(message))

    def run(self, args, *, capture=True):
        args = list(args)
        self.calls.append((args, capture))
        for prefix, output, error in self._responses:
            if args[: len(prefix)] == prefix:
                if error is not None:
                    raise error
                return output
        return ""

    @property
    def commands(self):
        return [args for args, _ in self.calls]

    def matching(self, *prefix):
        return [args for args in self.commands if args[: len(prefix)] == list(prefix)]


class ScriptedPrompts:
    """Answers prompts from a queue and remembers what was asked."""

    def __init__(self):
        self.answers = []
        self.asked = []

    def queue(self, *answers):
        self.answers.extend(answers)

    def _answer(self, kind, message, **details):
        self.asked.append((kind, message, details))
        if not self.answers:
            raise AssertionError(f"Unexpected {kind} prompt: {message}")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def select(self, message, choices, default=None):
        return self._answer("select", message, choices=list(choices), default=default)

    def checkbox(self, message, choices, validate=None, invalid_message="Invalid input"):
        return self._answer("checkbox", message, choices=list(choices))

    def text(self, message, validate=None, invalid_message="Invalid input"):
        answer = self._answer("text", message)
        if validate is not None:
            assert validate(answer), f"{answer!r} rejected: {invalid_message}"
        return answer

    def confirm(self, message, default=False):
        return self._answer("confirm", message, default=default)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep tests away from the user's config file and gcloud binary."""
    monkeypatch.setenv("DEPLOYZZZ_CONFIG", str(tmp_path / "config.yaml"))
    monkeypatch.delenv("DEPLOYZZZ_GCLOUD", raising=False)
    monkeypatch.delenv("DEPLOYZZZ_LOG_LEVEL", raising=False)
    monkeypatch.setattr(display.console, "width", 200)
    config.set_settings(config.Settings())
    yield
    config.set_settings(None)
    set_runner(None)


@pytest.fixture
def gcloud():
    """Install a RecordingRunner as the process-wide runner."""
    runner = RecordingRunner()
    set_runner(runner)
    return runner


@pytest.fixture
def scripted_prompts(monkeypatch):
    scripted = ScriptedPrompts()
    for name in ("select", "checkbox", "text", "confirm"):
        monkeypatch.setattr(prompts, name, getattr(scripted, name))
    return scripted
