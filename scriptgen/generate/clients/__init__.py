# Model clients.
# build_model_client() picks one from settings; provider SDKs are imported lazily.

import logging

logger = logging.getLogger(__name__)

PROVIDERS = ("gemini", "openai", "ollama", "echo")


class MissingCredentialError(Exception):
    """The selected provider needs an API key that is not configured."""

    def __init__(self, provider: str, env_var: str):
        self.provider = provider
        self.env_var = env_var
        super().__init__(f"{env_var} is not set. Please create a .env file and add your key.")


def build_model_client(settings):
    provider = settings.MODEL_PROVIDER.strip().lower()

    if provider == "gemini":
        if not settings.GEMINI_API_KEY:
            raise MissingCredentialError("gemini", "GEMINI_API_KEY")
        from .gemini_client import GeminiClient
        client = GeminiClient(
            api_key=settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            timeout=settings.GENERATION_TIMEOUT,
        )
    elif provider == "openai":
        if not settings.OPENAI_API_KEY:
            raise MissingCredentialError("openai", "OPENAI_API_KEY")
        from .openai_client import OpenAIClient
        client = OpenAIClient(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            timeout=settings.GENERATION_TIMEOUT,
        )
    elif provider == "ollama":
        from .ollama_client import OllamaClient
        client = OllamaClient(
            host=settings.OLLAMA_HOST,
            model=settings.OLLAMA_MODEL,
            timeout=settings.GENERATION_TIMEOUT,
        )
    elif provider == "echo":
        from .echo_dev_client import EchoDevClient
        client = EchoDevClient()
    else:
        raise ValueError(f"Unknown MODEL_PROVIDER {provider!r}; expected one of {', '.join(PROVIDERS)}")

    logger.info("Using %s model client (%s).", provider, client.model)
    return client


__all__ = ["build_model_client", "MissingCredentialError", "PROVIDERS"]
