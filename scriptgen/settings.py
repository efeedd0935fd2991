# scriptgen/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="SimPhy Script Generator")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    LOG_LEVEL: str = Field(default="INFO")

    # server
    HOST: str = Field(default="localhost")
    PORT: int = Field(default=3000)

    # knowledge base (json or yaml)
    KNOWLEDGE_BASE_PATH: str = Field(default="knowledge_base.json")

    # model provider: gemini | openai | ollama | echo
    MODEL_PROVIDER: str = Field(default="gemini")
    GENERATION_TIMEOUT: float = Field(default=120.0)

    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = Field(default="gemini-1.5-flash-latest")

    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")

    OLLAMA_HOST: str = Field(default="http://localhost:11434")
    OLLAMA_MODEL: str = Field(default="mistral:7b-instruct")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
