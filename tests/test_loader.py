"""Tests for loading, validating and serializing script files."""

import json

import pytest

from shmenu_lib.errors import ScriptValidationError
from shmenu_lib.script import (
    load_package_json,
    load_script_file,
    parse_script,
    script_to_data,
)
from shmenu_lib.script.loader import is_simple_file_name
from shmenu_lib.script.validation import validate_script_data, validate_simple_script_data


class TestAdvancedScripts:

    def test_root_option(self, advanced_yaml):
        script = load_script_file(advanced_yaml)
        root = script.get_option("git")
        assert script.name == "git"
        assert root.message == "What do you want to do?"
        assert root.choices == ["status", "remote branch", "commit", "quit"]

    def test_nested_option_has_back_and_quit(self, advanced_yaml):
        script = load_script_file(advanced_yaml)
        commit = script.get_option("git.commit")
        assert commit.name == "commit"
        assert commit.message == "Commit how?"
        assert commit.choices == ["all", "amend", "back", "quit"]

    def test_whitespace_choice_key(self, advanced_yaml):
        script = load_script_file(advanced_yaml)
        assert script.get_command("git.remote_branch").directives == ["git remote -v"]

    def test_numbered_command_and_variables(self, advanced_yaml):
        command = load_script_file(advanced_yaml).get_command("git.commit.all")
        assert command.directives == ["git add -A", 'git commit -m "$MESSAGE"']
        assert command.variables == {"$MESSAGE": "Commit message?"}
        assert command.message == "Committing everything"

    def test_directories(self, advanced_yaml):
        script = load_script_file(advanced_yaml)
        assert script.get_directory("git").path == "~/code"
        assert script.get_directory("git.commit.amend").path == "/tmp"
        assert script.resolve_directory("git.commit.all").path == "~/code"

    def test_json_file(self, write_file):
        path = write_file("tool.json", json.dumps({
            "tool": {"options": {"build": {"command": {"1": "make", "2": "make install"}}}}
        }))
        script = load_script_file(path)
        assert script.get_command("tool.build").directives == ["make", "make install"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_script_file(tmp_path / "nope.yml")

    def test_wrong_extension(self, write_file):
        path = write_file("script.txt", "x: {command: ls}")
        with pytest.raises(ScriptValidationError, match="Expected a .yml"):
            load_script_file(path)

    def test_yaml_syntax_error(self, write_file):
        path = write_file("broken.yml", "a: [unclosed\n")
        with pytest.raises(ScriptValidationError, match="YAML syntax error"):
            load_script_file(path)


class TestValidation:

    def test_valid(self):
        assert validate_script_data({"s": {"options": {"a": {"command": "ls"}}}}) == []

    def test_multiple_roots(self):
        errors = validate_script_data({"a": {"command": "ls"}, "b": {"command": "ls"}})
        assert "exactly one root key" in errors[0]

    def test_node_without_command_or_options(self):
        errors = validate_script_data({"s": {"options": {"a": {"message": "hi"}}}})
        assert errors == ["s.a: must have either 'command' or 'options'"]

    @pytest.mark.parametrize("name", ["command", "options", "variables", "back", "quit", "add-command"])
    def test_reserved_option_names(self, name):
        errors = validate_script_data({"s": {"options": {name: {"command": "ls"}}}})
        assert len(errors) == 1
        assert f"'{name}'" in errors[0]

    def test_variables_must_be_strings(self):
        errors = validate_script_data({"s": {"command": "echo X", "variables": {"X": 1}}})
        assert errors == ["s.variables: must be a flat mapping of strings to strings"]

    def test_numbered_command_must_start_at_one(self):
        errors = validate_script_data({"s": {"command": {2: "ls"}}})
        assert "numbered mapping" in errors[0]

    def test_invalid_file_raises_with_errors(self, write_file):
        path = write_file("bad.yml", "s:\n  options:\n    a:\n      message: hi\n")
        with pytest.raises(ScriptValidationError) as exc_info:
            load_script_file(path)
        assert exc_info.value.errors == ["s.a: must have either 'command' or 'options'"]

    def test_simple_reserved_segment(self):
        errors = validate_simple_script_data({"s": {"git:back": "ls"}})
        assert "reserved word 'back'" in errors[0]

    def test_sibling_names_normalizing_to_one_key(self):
        errors = validate_script_data({"c": {"options": {
            "a b": {"command": "echo space"},
            "a_b": {"command": "echo underscore"},
        }}})
        assert errors == ["c.options: 'a_b' collides with 'a b'"]

    def test_collision_between_command_and_option(self, write_file):
        path = write_file("c.yml", """\
            c:
              options:
                a b:
                  command: echo space
                a_b:
                  options:
                    x:
                      command: echo x
            """)
        with pytest.raises(ScriptValidationError, match="collides with"):
            load_script_file(path)

    def test_same_name_in_different_options_is_allowed(self):
        data = {"s": {"options": {
            "a": {"options": {"x y": {"command": "ls"}}},
            "b": {"options": {"x_y": {"command": "ls"}}},
        }}}
        assert validate_script_data(data) == []

    @pytest.mark.parametrize("name", ["a.b", "up ↓ down", "go → there"])
    def test_names_that_break_keys_or_documented_mode(self, name):
        errors = validate_script_data({"s": {"options": {name: {"command": "ls"}}}})
        assert len(errors) == 1
        assert f"'{name}'" in errors[0]

    def test_simple_sibling_segments_collide(self):
        errors = validate_simple_script_data({"s": {"a b:x": "ls", "a_b:y": "pwd"}})
        assert errors == ["s.a_b:y: 'a_b' collides with 'a b'"]

    def test_simple_command_collides_with_prefix(self, write_file):
        path = write_file("s.simple.yml", "s:\n  a b: ls\n  a_b:x: pwd\n")
        with pytest.raises(ScriptValidationError, match="'a_b' collides with 'a b'"):
            load_script_file(path)

    def test_simple_repeated_prefix_is_not_a_collision(self):
        assert validate_simple_script_data({"s": {"git:status": "a", "git:log": "b", "git": "c"}}) == []


class TestSimpleScripts:

    def test_is_simple_file_name(self):
        assert is_simple_file_name("tools.simple.yml")
        assert is_simple_file_name("tools.simple.json")
        assert not is_simple_file_name("tools.yml")

    def test_single_command(self, write_file):
        script = load_script_file(write_file("hello.simple.yml", "hello: echo hi\n"))
        assert script.get_command("hello").directives == ["echo hi"]
        assert script.get_option("hello") is None

    def test_colon_paths_become_options(self, write_file):
        path = write_file("tools.simple.yml", """\
            tools:
              build: make
              git:status: git status
              git:log:short: git log --oneline
            """)
        script = load_script_file(path)
        assert script.get_option("tools").choices == ["build", "git", "quit"]
        assert script.get_option("tools.git").choices == ["status", "log", "back", "quit"]
        assert script.get_option("tools.git.log").choices == ["short", "back", "quit"]
        assert script.get_command("tools.git.log.short").directives == ["git log --oneline"]

    def test_command_that_is_also_an_option_moves_deeper(self, write_file):
        path = write_file("tools.simple.yml", """\
            tools:
              test: pytest
              test:fast: pytest -x
            """)
        script = load_script_file(path)
        assert script.get_option("tools.test").choices == ["test", "fast", "back", "quit"]
        assert script.get_command("tools.test.test").directives == ["pytest"]
        assert script.get_command("tools.test.fast").directives == ["pytest -x"]


class TestPackageJson:

    def test_hidden_npm_directives(self, write_file):
        path = write_file("package.json", json.dumps({
            "name": "app",
            "scripts": {"build": "webpack", "test:unit": "jest"},
        }))
        script = load_package_json(path, "yarn")
        build = script.get_command("scripts.build")
        assert script.name == "scripts"
        assert build.directives == ["webpack"]
        assert build.hidden_directives == ["yarn run build"]
        assert script.get_command("scripts.test.unit").hidden_directives == ["yarn run test:unit"]

    def test_missing_scripts(self, write_file):
        path = write_file("package.json", json.dumps({"name": "app"}))
        with pytest.raises(ScriptValidationError, match="Missing 'scripts'"):
            load_package_json(path, "npm")


class TestSerialization:

    def test_round_trip(self, advanced_yaml):
        script = load_script_file(advanced_yaml)
        reparsed = parse_script(script_to_data(script))
        assert reparsed == script

    def test_numbered_commands_are_written_as_mapping(self, advanced_yaml):
        data = script_to_data(load_script_file(advanced_yaml))
        all_node = data["git"]["options"]["commit"]["options"]["all"]
        assert all_node["command"] == {1: "git add -A", 2: 'git commit -m "$MESSAGE"'}
