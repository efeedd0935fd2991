# Generator package
# Exposes the relay, its data types and the dev client.

from .relay import ScriptRelay, PROMPT_REQUIRED, GENERATION_FAILED
from .types import Message, ModelParams, GenerationResult, RelayStatus, GENERATION_CONFIG
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "ScriptRelay",
    "PROMPT_REQUIRED",
    "GENERATION_FAILED",
    "Message",
    "ModelParams",
    "GenerationResult",
    "RelayStatus",
    "GENERATION_CONFIG",
    "EchoDevClient",
]
