"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from tickoff.cli import format_task, main
from tickoff.config import Config
from tickoff.core.tasks import Task


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    monkeypatch.setattr("tickoff.cli.load_config", lambda: Config())


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def invoke(runner, tmp_path):
    def _invoke(*args, input=None):
        return runner.invoke(main, ["--data-dir", str(tmp_path), *args], input=input)

    return _invoke


def _ids(invoke):
    return [t["id"] for t in json.loads(invoke("list", "--json").output)]


def test_format_task():
    assert format_task(Task(id="1", text="buy milk")) == "1  [ ] buy milk"
    assert format_task(Task(id="2", text="call mom", checked=True)) == "2  [x] call mom"


class TestList:
    def test_empty(self, invoke):
        result = invoke("list")
        assert result.exit_code == 0
        assert "Nothing to do." in result.output

    def test_json_empty(self, invoke):
        result = invoke("list", "--json")
        assert json.loads(result.output) == []

    def test_shows_tasks_in_order(self, invoke):
        invoke("add", "buy", "milk")
        invoke("add", "call mom")
        lines = invoke("list").output.strip().splitlines()
        assert lines[0].endswith("[ ] buy milk")
        assert lines[1].endswith("[ ] call mom")


class TestAdd:
    def test_add_persists(self, invoke, tmp_path):
        result = invoke("add", "buy milk")
        assert result.exit_code == 0
        assert "[ ] buy milk" in result.output
        stored = json.loads((tmp_path / "tasks.json").read_text())
        assert [t["text"] for t in stored] == ["buy milk"]

    def test_blank_is_silently_ignored(self, invoke, tmp_path):
        result = invoke("add", "   ")
        assert result.exit_code == 0
        assert result.output == ""
        assert not (tmp_path / "tasks.json").exists()

    def test_no_words(self, invoke):
        result = invoke("add")
        assert result.exit_code == 0
        assert result.output == ""


class TestCheck:
    def test_toggles(self, invoke):
        invoke("add", "buy milk")
        (task_id,) = _ids(invoke)

        assert "[x] buy milk" in invoke("check", task_id).output
        assert "[ ] buy milk" in invoke("check", task_id).output

    def test_unknown_id(self, invoke):
        result = invoke("check", "nope")
        assert result.exit_code == 1
        assert "No task with id nope" in result.output


class TestDelete:
    def test_deletes(self, invoke):
        invoke("add", "a")
        invoke("add", "b")
        first, second = _ids(invoke)

        result = invoke("delete", first)
        assert result.exit_code == 0
        assert _ids(invoke) == [second]

    def test_unknown_id(self, invoke):
        result = invoke("delete", "nope")
        assert result.exit_code == 1


class TestEdit:
    def test_with_text_option(self, invoke):
        invoke("add", "buy milk")
        (task_id,) = _ids(invoke)
        invoke("check", task_id)

        result = invoke("edit", task_id, "--text", "buy oat milk")
        assert result.exit_code == 0
        assert f"{task_id}  [x] buy oat milk" in result.output

    def test_interactive_save(self, invoke):
        invoke("add", "buy milk")
        (task_id,) = _ids(invoke)

        result = invoke("edit", task_id, input="buy oat milk\ny\n")
        assert result.exit_code == 0
        stored = json.loads(invoke("list", "--json").output)
        assert stored == [{"id": task_id, "text": "buy oat milk", "checked": False}]

    def test_interactive_cancel(self, invoke):
        invoke("add", "buy milk")
        (task_id,) = _ids(invoke)

        result = invoke("edit", task_id, input="something else\nn\n")
        assert result.exit_code == 0
        assert "Cancelled." in result.output
        assert json.loads(invoke("list", "--json").output)[0]["text"] == "buy milk"

    def test_unknown_id(self, invoke):
        result = invoke("edit", "nope", "--text", "x")
        assert result.exit_code == 1
        assert "No task with id nope" in result.output


def test_corrupt_store_starts_empty(invoke, tmp_path):
    (tmp_path / "tasks.json").write_text("{ definitely not a task list")
    result = invoke("list")
    assert result.exit_code == 0
    assert "Nothing to do." in result.output
