# Data model for the loaded knowledge base.
# Built once at startup and shared read-only by every request.

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class KnowledgeBase:
    """Concept name -> API description, plus its frozen JSON dump.

    `data` is read-only all the way down: mappings become mapping proxies
    and lists become tuples.
    """
    source: Path
    data: Mapping[str, Any]
    serialized: str

    def __len__(self) -> int:
        return len(self.data)


class KnowledgeBaseError(Exception):
    """The knowledge base file is missing, unreadable or malformed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(freeze(v) for v in value)
    return value
