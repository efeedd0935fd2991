# ===============================================
# tests/test_knowledge.py
# Knowledge base loading + immutability
# ===============================================

import json

import pytest

from scriptgen.knowledge import KnowledgeBaseError, load_knowledge_base


def test_loads_json(kb_path):
    kb = load_knowledge_base(kb_path)
    assert dict(kb.data) == {"Body": "create rigid body"}
    assert kb.serialized == '{\n  "Body": "create rigid body"\n}'
    assert len(kb) == 1
    assert kb.source == kb_path


def test_loads_yaml(tmp_path):
    path = tmp_path / "kb.yaml"
    path.write_text("Body: create rigid body\nJoint: connect two bodies\n", encoding="utf-8")
    kb = load_knowledge_base(path)
    assert list(kb.data) == ["Body", "Joint"]
    assert json.loads(kb.serialized) == {"Body": "create rigid body", "Joint": "connect two bodies"}


def test_serialization_keeps_order_and_unicode(tmp_path):
    path = tmp_path / "kb.json"
    path.write_text('{"Zeta": "ζ", "Alpha": "α"}', encoding="utf-8")
    kb = load_knowledge_base(path)
    assert kb.serialized == '{\n  "Zeta": "ζ",\n  "Alpha": "α"\n}'


def test_missing_file(tmp_path):
    with pytest.raises(KnowledgeBaseError) as exc:
        load_knowledge_base(tmp_path / "nope.json")
    assert exc.value.reason == "file not found"


@pytest.mark.parametrize("name,content", [
    ("kb.json", "{not json"),
    ("kb.yaml", "Body: [unclosed"),
    ("kb.json", "[1, 2, 3]"),
    ("kb.json", "null"),
    ("kb.yaml", ""),
])
def test_malformed_file(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(KnowledgeBaseError):
        load_knowledge_base(path)


def test_knowledge_base_is_read_only(knowledge_base):
    with pytest.raises(TypeError):
        knowledge_base.data["Body"] = "changed"
    with pytest.raises(AttributeError):
        knowledge_base.serialized = "{}"


def test_bundled_knowledge_base_loads():
    from pathlib import Path
    kb = load_knowledge_base(Path(__file__).resolve().parent.parent / "knowledge_base.json")
    assert "World" in kb.data


def test_yaml_value_without_json_form(tmp_path):
    path = tmp_path / "kb.yaml"
    path.write_text("Body: create rigid body\nReleased: 2020-01-01\n", encoding="utf-8")
    with pytest.raises(KnowledgeBaseError) as exc:
        load_knowledge_base(path)
    assert "serialize" in exc.value.reason


def test_invalid_utf8(tmp_path):
    path = tmp_path / "kb.json"
    path.write_bytes(b'{"Body": "\xff"}')
    with pytest.raises(KnowledgeBaseError) as exc:
        load_knowledge_base(path)
    assert "UTF-8" in exc.value.reason


def test_nested_values_are_read_only(tmp_path):
    path = tmp_path / "kb.json"
    path.write_text('{"Body": {"methods": ["setMass", "setPosition"]}}', encoding="utf-8")
    kb = load_knowledge_base(path)

    with pytest.raises(TypeError):
        kb.data["Body"]["methods"] = []
    with pytest.raises(AttributeError):
        kb.data["Body"]["methods"].append("setCharge")
    assert kb.data["Body"]["methods"] == ("setMass", "setPosition")
    assert '"setMass",' in kb.serialized
