# Client for Ollama local inference.
# Talks to /api/chat with streaming off, so the whole reply comes back at once.

import requests
from typing import List, Tuple, Dict, Any
from ..types import Message, ModelParams


class OllamaClient:
    def __init__(self, host: str = "http://localhost:11434", model: str = "mistral:7b-instruct", timeout: float = 120.0):
        self.host = host.rstrip("/")
        self.model = model
        self.timeout = timeout

    def _options(self, params: ModelParams) -> Dict[str, Any]:
        opts = {
            "temperature": params.temperature,
            "top_k": params.top_k,
            "top_p": params.top_p,
            "num_predict": params.max_tokens,
        }
        return {k: v for k, v in opts.items() if v is not None}

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        payload = {
            "model": self.model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "stream": False,
            "options": self._options(params),
        }
        resp = requests.post(f"{self.host}/api/chat", json=payload, timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        return data["message"]["content"], {"engine": "ollama", "model": self.model}
