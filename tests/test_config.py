import os
import json
import tempfile

from passforge import config
from passforge.storage import default_settings_path


def test_missing_config_gives_defaults():
    with tempfile.TemporaryDirectory() as td:
        cfg = config.load_config(os.path.join(td, "config.json"))
        assert cfg == config.DEFAULTS
        assert cfg is not config.DEFAULTS

def test_load_merges_defaults():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "config.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"default_length": 24}, f)
        cfg = config.load_config(path)
        assert cfg["default_length"] == 24
        assert cfg["log_level"] == "WARNING"

def test_unreadable_config_falls_back():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "config.json")
        with open(path, "w") as f:
            f.write("oops")
        assert config.load_config(path) == config.DEFAULTS

def test_settings_path():
    assert config.settings_path({"settings_path": "/tmp/x.json"}) == "/tmp/x.json"
    assert config.settings_path(config.DEFAULTS) == default_settings_path()

def test_app_dir_uses_appdata(monkeypatch):
    monkeypatch.setenv("APPDATA", os.path.join("C:", "Users", "me", "AppData"))
    assert config.config_path() == os.path.join("C:", "Users", "me", "AppData", "PassForge", "config.json")
    monkeypatch.delenv("APPDATA")
    assert config.config_path() == os.path.join(os.path.expanduser("~"), ".passforge", "config.json")
