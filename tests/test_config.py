import json

import pytest

from askgpt import config as mod
from askgpt.errors import ConfigError


def test_config_dir_created_from_env(tmp_path):
    target = tmp_path / "nested" / "cfg"
    path = mod.config_dir({"ASKGPT_HOME": str(target)})
    assert path == target
    assert target.is_dir()


def test_load_settings_defaults(home):
    s = mod.load_settings()
    assert s.config_file == home / "config.json"
    assert s.db_file == home / "qa.db"
    assert s.bucket == "questions_and_answers"
    assert s.model == "gpt-3.5-turbo"
    assert s.temperature == 0.7
    assert s.api_url == "https://api.openai.com/v1/chat/completions"


def test_load_settings_overrides(tmp_path):
    env = {
        "ASKGPT_HOME": str(tmp_path),
        "ASKGPT_MODEL": "gpt-test",
        "ASKGPT_TEMPERATURE": "0.1",
        "ASKGPT_TIMEOUT": "5",
        "ASKGPT_API_URL": "http://localhost:9/v1/chat/completions",
    }
    s = mod.load_settings(env)
    assert s.model == "gpt-test"
    assert s.temperature == 0.1
    assert s.timeout == 5.0
    assert s.api_url.startswith("http://localhost:9")


def test_bad_temperature(tmp_path):
    with pytest.raises(ConfigError):
        mod.load_settings({"ASKGPT_HOME": str(tmp_path), "ASKGPT_TEMPERATURE": "warm"})


def test_load_config(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"api_key": "sk-1", "extra": True}))
    assert mod.load_config(p).api_key == "sk-1"


def test_missing_config(tmp_path):
    with pytest.raises(ConfigError, match="does not exist"):
        mod.load_config(tmp_path / "config.json")


@pytest.mark.parametrize("body", ["not json", "{}", '{"api_key": ""}'])
def test_invalid_config(tmp_path, body):
    p = tmp_path / "config.json"
    p.write_text(body)
    with pytest.raises(ConfigError):
        mod.load_config(p)


def test_config_not_utf8(tmp_path):
    p = tmp_path / "config.json"
    p.write_bytes(b'{"api_key": "\xff"}')
    with pytest.raises(ConfigError, match="Error reading config file"):
        mod.load_config(p)
