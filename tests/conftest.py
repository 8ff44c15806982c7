"""Pytest configuration and fixtures for shmenu tests."""

import textwrap
from pathlib import Path

import pytest

from shmenu_lib.common.prompts import Prompter, Question
from shmenu_lib.engine.process import ProcessHandle, ProcessRunner
from shmenu_lib.errors import PromptClosedError
from shmenu_lib.script import ChoiceList, Command, Directory, Option, Script


class FakePrompter(Prompter):
    """Answers questions from a scripted list, in the order they are asked."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.questions = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    async def ask(self, question: Question):
        if self._closed:
            raise PromptClosedError("Prompt stream has ended")
        self.questions.append(question)
        if not self.answers:
            raise PromptClosedError("No more scripted answers")
        return self.answers.pop(0)


class FakeHandle(ProcessHandle):

    def __init__(self, returncode=0):
        self.returncode = returncode

    @property
    def pid(self) -> int:
        return 4194304

    async def wait(self) -> int:
        return self.returncode


class FakeProcessRunner(ProcessRunner):
    """Records spawns instead of starting processes."""

    def __init__(self, returncode=0, fail_with=None, prompter=None):
        self.returncode = returncode
        self.fail_with = fail_with
        self.prompter = prompter
        self.spawned = []
        self.prompter_closed_at_spawn = None

    async def spawn(self, directive, working_directory, shell):
        if self.prompter is not None:
            self.prompter_closed_at_spawn = self.prompter.closed
        if self.fail_with is not None:
            raise self.fail_with
        self.spawned.append((directive, working_directory, shell))
        return FakeHandle(self.returncode)


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    """Plain output so messages can be compared."""
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def temp_home(tmp_path, monkeypatch):
    """Point the application home at a temporary directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("SHMENU_HOME", str(home))
    return home


@pytest.fixture
def runner():
    return FakeProcessRunner()


@pytest.fixture
def deploy_script(tmp_path):
    """
    deploy
      staging                  -> echo hello
      production (dir tmp_path)
        web                    -> echo one && echo two
        db                     -> echo $NAME (variable)
    """
    script = Script(name="deploy")
    script.add_option("deploy", Option(
        name="deploy",
        choices=ChoiceList.for_option(["staging", "production"], root=True),
    ))
    script.add_command("deploy.staging", Command(directives=["echo hello"]))
    script.add_option("deploy.production", Option(
        name="production",
        message="Which service?",
        choices=ChoiceList.for_option(["web", "db"]),
    ))
    script.add_directory("deploy.production", Directory(str(tmp_path)))
    script.add_command("deploy.production.web", Command(directives=["echo one", "echo two"]))
    script.add_command("deploy.production.db", Command(
        directives=["echo $NAME"],
        variables={"$NAME": "Database name?"},
    ))
    return script


@pytest.fixture
def write_file(tmp_path):
    """Write a dedented file under tmp_path and return its path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def advanced_yaml(write_file):
    return write_file("git.yml", """\
        git:
          message: What do you want to do?
          directory: ~/code
          options:
            status:
              command: git status
            remote branch:
              command: git remote -v
            commit:
              message: Commit how?
              options:
                all:
                  message: Committing everything
                  command:
                    1: git add -A
                    2: git commit -m "$MESSAGE"
                  variables:
                    $MESSAGE: Commit message?
                amend:
                  directory: /tmp
                  command: git commit --amend
        """)
