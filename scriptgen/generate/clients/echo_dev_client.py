# Offline model client for local dev and tests.
# Emits a stub SimPhy script with the live turn echoed back as comments.

from typing import List, Tuple, Dict, Any
from ..types import Message, ModelParams


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        live = messages[-1].content if messages else "(no user input)"
        echoed = "\n".join(f"// {line}" for line in live.splitlines())
        text = f"// [ECHO RESPONSE] {len(messages)} message(s)\n{echoed}\nWorld.clearAll();\n"
        meta = {"engine": "echo", "model": self.model, "temp": params.temperature, "max_tokens": params.max_tokens}
        return text, meta
