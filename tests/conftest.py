# Shared fixtures: a recording fake model client and a tiny knowledge base.

import json

import pytest
from fastapi.testclient import TestClient

from scriptgen.app import create_app
from scriptgen.generate import ScriptRelay
from scriptgen.knowledge import load_knowledge_base


class FakeModelClient:
    """Returns a canned reply (or raises) and records every call."""

    def __init__(self, reply="World.clearAll();", error=None):
        self.model = "fake"
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, messages, params):
        self.calls.append((messages, params))
        if self.error is not None:
            raise self.error
        return self.reply, {"engine": "fake", "model": self.model}


@pytest.fixture
def kb_path(tmp_path):
    path = tmp_path / "knowledge_base.json"
    path.write_text(json.dumps({"Body": "create rigid body"}), encoding="utf-8")
    return path


@pytest.fixture
def knowledge_base(kb_path):
    return load_knowledge_base(kb_path)


@pytest.fixture
def fake_client():
    return FakeModelClient()


@pytest.fixture
def relay(fake_client, knowledge_base):
    return ScriptRelay(fake_client, knowledge_base)


@pytest.fixture
def client(relay):
    return TestClient(create_app(relay))
