# Client for the OpenAI Chat Completions API.
# Same interface as GeminiClient / OllamaClient.

from typing import List, Tuple, Dict, Any
from openai import OpenAI
from ..types import Message, ModelParams


class OpenAIClient:
    def __init__(self, api_key: str, model: str = "gpt-4o-mini", timeout: float = 120.0):
        self.model = model
        self.client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        formatted = [{"role": m.role, "content": m.content} for m in messages]
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=formatted,
            temperature=params.temperature,
            top_p=params.top_p,
            max_tokens=params.max_tokens,
        )
        text = resp.choices[0].message.content
        if text is None:
            raise RuntimeError(f"OpenAI returned no content (finish_reason={resp.choices[0].finish_reason})")
        meta = {"engine": "openai", "model": self.model}
        return text, meta
