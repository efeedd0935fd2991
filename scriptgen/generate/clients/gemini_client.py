# Client for the Google Gemini API (google-generativeai SDK).
# Every message but the last becomes chat history; the last one is sent live.

from typing import List, Tuple, Dict, Any

import google.generativeai as genai

from ..types import Message, ModelParams


def _to_gemini_role(role: str) -> str:
    # Gemini only knows "user" and "model"
    return "model" if role in {"assistant", "model"} else "user"


class GeminiClient:
    def __init__(self, api_key: str, model: str = "gemini-1.5-flash-latest", timeout: float = 120.0):
        self.model = model
        self.timeout = timeout
        genai.configure(api_key=api_key)

    def _generation_config(self, params: ModelParams) -> genai.types.GenerationConfig:
        return genai.types.GenerationConfig(
            temperature=params.temperature,
            top_k=params.top_k,
            top_p=params.top_p,
            max_output_tokens=params.max_tokens,
        )

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        if not messages:
            raise ValueError("GeminiClient.generate needs at least one message")
        *history, live = messages

        model = genai.GenerativeModel(self.model)
        chat = model.start_chat(
            history=[{"role": _to_gemini_role(m.role), "parts": [m.content]} for m in history]
        )
        resp = chat.send_message(
            live.content,
            generation_config=self._generation_config(params),
            request_options={"timeout": self.timeout},
        )
        return resp.text, {"engine": "gemini", "model": self.model}
