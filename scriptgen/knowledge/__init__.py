# Knowledge base package.
# Exposes the loader and the immutable KnowledgeBase value.

from .loader import load_knowledge_base
from .types import KnowledgeBase, KnowledgeBaseError

__all__ = ["load_knowledge_base", "KnowledgeBase", "KnowledgeBaseError"]
