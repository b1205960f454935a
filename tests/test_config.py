import io

import pytest

from proplogic.ui.config import Config, ConfigError


def test_defaults():
    config = Config()
    assert config["passes"] == ["optimize", "de_morgan"]
    assert config["expectative"] is True
    assert config["normalize"] is False
    assert config.log_config() == ("2>", False)


def test_yaml():
    config = Config(io.StringIO(
        "passes: [apply]\n"
        "expectative: false\n"
        "log:\n"
        "    output: '-'\n"
        "    debug: true\n"
    ))
    assert config["passes"] == ["apply"]
    assert config["expectative"] is False
    assert config.log_config() == ("-", True)


def test_single_pass_name():
    assert Config(io.StringIO("passes: simplify"))["passes"] == ["simplify"]


@pytest.mark.parametrize("text", [
    "passes: [compile]",
    "expectative: maybe",
    "log: stderr",
    "- just a list",
])
def test_invalid(text):
    with pytest.raises(ConfigError):
        Config(io.StringIO(text))


def test_load_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "proplogic.yaml"
    path.write_text("normalize: true\n")
    monkeypatch.setenv(Config.EnvVar, str(path))
    assert Config.load()["normalize"] is True
    monkeypatch.delenv(Config.EnvVar)
    assert Config.load()["normalize"] is False
