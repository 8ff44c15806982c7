"""Tests for settings and the saved script store."""

import pytest

from shmenu_lib.config import Settings, load_settings, save_settings
from shmenu_lib.config.constants import app_home, config_file, scripts_dir
from shmenu_lib.config.store import ScriptStore
from shmenu_lib.errors import ScriptNotFoundError
from shmenu_lib.script import Command, Script


def make_script(name):
    script = Script(name=name)
    script.add_command(name, Command(directives=[f"echo {name}"]))
    return script


class TestPaths:

    def test_home_override(self, temp_home):
        assert app_home() == temp_home
        assert config_file() == temp_home / "config.json"
        assert scripts_dir() == temp_home / "scripts"


class TestSettings:

    def test_defaults_without_file(self, temp_home):
        settings = load_settings()
        assert settings == Settings(shell="/bin/bash", npm_alias="npm")

    def test_save_and_load(self, temp_home):
        save_settings(Settings(shell="/bin/zsh", npm_alias="yarn"))
        assert config_file().exists()
        assert load_settings() == Settings(shell="/bin/zsh", npm_alias="yarn")

    def test_missing_keys_use_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"npm_alias": "pnpm"}')
        assert load_settings(path) == Settings(shell="/bin/bash", npm_alias="pnpm")


class TestScriptStore:

    def test_empty_store(self, tmp_path):
        store = ScriptStore(tmp_path / "scripts")
        assert store.names() == []
        assert not store.exists("anything")

    def test_save_and_get(self, tmp_path, deploy_script):
        store = ScriptStore(tmp_path / "scripts")
        path = store.save(deploy_script)

        assert path == tmp_path / "scripts" / "deploy.yml"
        assert store.get("deploy") == deploy_script

    def test_names_are_sorted(self, tmp_path):
        store = ScriptStore(tmp_path)
        for name in ("zeta", "alpha", "mid"):
            store.save(make_script(name))
        assert store.names() == ["alpha", "mid", "zeta"]

    def test_get_missing(self, tmp_path):
        with pytest.raises(ScriptNotFoundError, match="no saved script with the name ghost"):
            ScriptStore(tmp_path).get("ghost")

    def test_delete(self, tmp_path):
        store = ScriptStore(tmp_path)
        store.save(make_script("a"))
        store.delete("a")
        assert store.names() == []
        with pytest.raises(ScriptNotFoundError):
            store.delete("a")

    def test_delete_all(self, tmp_path):
        store = ScriptStore(tmp_path)
        store.save(make_script("a"))
        store.save(make_script("b"))
        assert store.delete_all() == 2
        assert store.names() == []
