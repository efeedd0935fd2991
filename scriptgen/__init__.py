# SimPhy script generation relay.
# Prompt + knowledge base -> LLM -> runnable SimPhy script.

__version__ = "0.3.0"
