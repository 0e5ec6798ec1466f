import json

import pytest

from loopless.config import Config, DEFAULTS


def test_defaults_without_config_file():
    config = Config()
    assert config.config_path is None
    for key, value in DEFAULTS.items():
        assert config[key] == value


def test_item_and_attribute_access_agree():
    config = Config()
    assert config["REPORT_PATH"] == config.REPORT_PATH
    config["NEW_VALUE"] = 3
    assert config.NEW_VALUE == 3
    assert "NEW_VALUE" in config


def test_instances_share_state():
    Config(DISPLAY_ROWS=4)
    other = Config(DISPLAY_ROWS=99)
    assert other.DISPLAY_ROWS == 4
    other["SHARED"] = "yes"
    assert Config().SHARED == "yes"


def test_reset_reloads():
    Config(DISPLAY_ROWS=4)
    Config.reset()
    assert Config().DISPLAY_ROWS == DEFAULTS["DISPLAY_ROWS"]


def test_kwargs_only_keep_capitals():
    config = Config(lower_case=1, UPPER_CASE=2)
    assert config.UPPER_CASE == 2
    assert not hasattr(config, "lower_case")


def test_get_default_and_missing_key():
    config = Config()
    assert config.get("NOT_A_KEY", "fallback") == "fallback"
    assert config.get("NOT_A_KEY") is None
    with pytest.raises(KeyError):
        config["NOT_A_KEY"]


def test_json_file_found_in_parent_directory(tmp_path, monkeypatch):
    with open(tmp_path / "loopless.config.json", "w") as fh:
        json.dump({"DATA_DIR_INTERIM": "data/interim", "ignored": True}, fh)
    child = tmp_path / "notebooks"
    child.mkdir()
    monkeypatch.chdir(child)

    config = Config()
    assert config.config_path == str(tmp_path / "loopless.config.json")
    assert config.DATA_DIR_INTERIM == "data/interim"
    assert not hasattr(config, "ignored")
    # Defaults the file doesn't set are still there
    assert config.DISPLAY_ROWS == DEFAULTS["DISPLAY_ROWS"]


def test_python_file_sees_its_path(tmp_path):
    path = tmp_path / "settings.py"
    path.write_text("import os\nREPORT_PATH = os.path.join(os.path.dirname(config_path), 'out.html')\n")

    config = Config(config_path=str(path))
    assert config.REPORT_PATH == str(tmp_path / "out.html")


def test_kwargs_override_file(tmp_path):
    path = tmp_path / "loopless.config.json"
    path.write_text(json.dumps({"DISPLAY_ROWS": 6}))
    assert Config(DISPLAY_ROWS=20).DISPLAY_ROWS == 20


def test_missing_file_falls_back_to_defaults(tmp_path):
    config = Config(config_path=str(tmp_path / "nope.json"))
    assert config.DISPLAY_ROWS == DEFAULTS["DISPLAY_ROWS"]


def test_missing_file_raises_when_not_silent(tmp_path):
    config = Config()
    with pytest.raises(FileNotFoundError):
        config._populate_from_file(str(tmp_path / "nope.json"))


def test_unknown_extension(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("DISPLAY_ROWS: 3\n")
    with pytest.raises(ValueError):
        Config(config_path=str(path))
