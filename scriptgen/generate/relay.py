# ScriptRelay: prompt -> augmented prompt -> one model call -> GenerationResult.
# The knowledge base and the model client are injected at construction time.

from __future__ import annotations

import logging
from typing import List

from scriptgen.knowledge import KnowledgeBase
from .prompts import SYSTEM_PROMPT, build_augmented_prompt
from .types import GENERATION_CONFIG, GenerationResult, Message, ModelParams, RelayStatus

logger = logging.getLogger(__name__)

PROMPT_REQUIRED = "Prompt is required"
GENERATION_FAILED = "Failed to generate script"


class ScriptRelay:
    def __init__(self, model_client, knowledge_base: KnowledgeBase, params: ModelParams = GENERATION_CONFIG):
        self.model_client = model_client
        self.knowledge_base = knowledge_base
        self.params = params

    def build_messages(self, user_prompt: str) -> List[Message]:
        """System rules as history, knowledge base + request as the live turn."""
        return [
            Message(role="user", content=SYSTEM_PROMPT),
            Message(role="user", content=build_augmented_prompt(self.knowledge_base.serialized, user_prompt)),
        ]

    def generate(self, user_prompt) -> GenerationResult:
        if not isinstance(user_prompt, str) or not user_prompt:
            return GenerationResult(status=RelayStatus.BAD_REQUEST, error=PROMPT_REQUIRED)

        logger.info('Received prompt: "%s"', user_prompt)
        messages = self.build_messages(user_prompt)

        try:
            text, meta = self.model_client.generate(messages, self.params)
        except Exception:
            logger.exception("Error calling the AI model")
            return GenerationResult(status=RelayStatus.GENERATION_FAILED, error=GENERATION_FAILED)

        logger.info("Script generated successfully. (%s)", (meta or {}).get("engine", "unknown"))
        return GenerationResult(status=RelayStatus.OK, script=text)
