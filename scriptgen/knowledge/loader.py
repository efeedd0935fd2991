# Reads the SimPhy API knowledge base from disk.
# JSON is the canonical format; YAML is accepted for hand-written files.

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from .types import KnowledgeBase, KnowledgeBaseError, freeze

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _parse(path: Path, raw: str):
    if path.suffix.lower() in YAML_SUFFIXES:
        return yaml.safe_load(raw)
    return json.loads(raw)


def serialize(data) -> str:
    """Pretty JSON dump embedded in every augmented prompt."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def load_knowledge_base(path: str | Path) -> KnowledgeBase:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise KnowledgeBaseError(path, "file not found") from e
    except UnicodeDecodeError as e:
        raise KnowledgeBaseError(path, f"not valid UTF-8 ({e})") from e
    except OSError as e:
        raise KnowledgeBaseError(path, f"cannot read file ({e})") from e

    try:
        data = _parse(path, raw)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise KnowledgeBaseError(path, f"parse error ({e})") from e

    if not isinstance(data, dict):
        raise KnowledgeBaseError(path, f"expected a mapping at top level, got {type(data).__name__}")

    # YAML can yield dates, sets or non-string keys that have no JSON form
    try:
        serialized = serialize(data)
    except (TypeError, ValueError) as e:
        raise KnowledgeBaseError(path, f"cannot serialize to JSON ({e})") from e

    kb = KnowledgeBase(source=path, data=freeze(data), serialized=serialized)
    logger.info("Successfully loaded the SimPhy knowledge base (%d entries from %s).", len(kb), path)
    return kb
