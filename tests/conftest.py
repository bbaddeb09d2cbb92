import json
import logging
import pathlib
import sys

# Make backend importable without installing
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "backend"))

import pytest

from askgpt.config import load_settings


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    def json(self):
        if self._payload is None:
            return json.loads(self.text)
        return self._payload


class FakePost:
    """Stands in for requests.post and records every call."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def __call__(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


def completion_payload(*contents):
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "model": "gpt-3.5-turbo",
        "choices": [
            {"message": {"role": "assistant", "content": c}, "finish_reason": "stop"}
            for c in contents
        ],
    }


@pytest.fixture
def home(tmp_path, monkeypatch):
    d = tmp_path / "askgpt-home"
    monkeypatch.setenv("ASKGPT_HOME", str(d))
    for name in ("ASKGPT_API_URL", "ASKGPT_MODEL", "ASKGPT_TEMPERATURE", "ASKGPT_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return d


@pytest.fixture
def configured_home(home):
    home.mkdir(parents=True, exist_ok=True)
    (home / "config.json").write_text(json.dumps({"api_key": "sk-test"}), encoding="utf-8")
    return home


@pytest.fixture
def settings(home):
    return load_settings()


@pytest.fixture
def log():
    return logging.getLogger("askgpt.test")
