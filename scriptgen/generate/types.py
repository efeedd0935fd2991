# Typed dataclasses shared across generator modules.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass
class Message:
    """Single chat turn: user or assistant."""
    role: str
    content: str


@dataclass(frozen=True)
class ModelParams:
    """Sampling parameters passed to every model client."""
    temperature: Optional[float] = None
    top_k: Optional[int] = None
    top_p: Optional[float] = None
    max_tokens: Optional[int] = None


# Deterministic-leaning settings used for every script request.
GENERATION_CONFIG = ModelParams(temperature=0.4, top_k=1, top_p=1.0, max_tokens=4096)


class RelayStatus(str, Enum):
    OK = "ok"
    BAD_REQUEST = "bad_request"
    GENERATION_FAILED = "generation_failed"


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one relay call: a script or an error message, never both."""
    status: RelayStatus
    script: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is RelayStatus.OK

    def to_payload(self) -> dict:
        if self.ok:
            return {"script": self.script}
        return {"error": self.error}
