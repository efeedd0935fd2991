# ============================================================
# SimPhy Script Generator FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Knowledge base loaded once at startup (json / yaml)
#   - ScriptRelay: system rules + knowledge base + user prompt
#   - Gemini, OpenAI, Ollama, or Echo model clients
# ============================================================

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

# --- Local imports ---
from scriptgen import __version__
from scriptgen.settings import Settings, settings as default_settings
from scriptgen.logs import setup_logging
from scriptgen.knowledge import KnowledgeBaseError, load_knowledge_base
from scriptgen.generate import ScriptRelay, GenerationResult, RelayStatus, PROMPT_REQUIRED
from scriptgen.generate.clients import MissingCredentialError, build_model_client

logger = logging.getLogger(__name__)

STATUS_CODES = {
    RelayStatus.OK: 200,
    RelayStatus.BAD_REQUEST: 400,
    RelayStatus.GENERATION_FAILED: 500,
}

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class GenerateRequest(BaseModel):
    prompt: Optional[str] = None


# ------------------------------------------------------------
# 🚀 FastAPI factory
# ------------------------------------------------------------
def create_app(relay: ScriptRelay, app_settings: Optional[Settings] = None) -> FastAPI:
    cfg = app_settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Backend server is running on http://%s:%d", cfg.HOST, cfg.PORT)
        yield

    app = FastAPI(title=cfg.APP_NAME, version=__version__, lifespan=lifespan)
    app.state.relay = relay

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Malformed bodies are reported like a missing prompt
    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError):
        logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": PROMPT_REQUIRED})

    # --------------------------------------------------------
    # 💬 Script generation route
    # --------------------------------------------------------
    @app.post("/generate")
    def generate(req: GenerateRequest):
        result: GenerationResult = app.state.relay.generate(req.prompt)
        return JSONResponse(status_code=STATUS_CODES[result.status], content=result.to_payload())

    # --------------------------------------------------------
    # 🧭 Health checks
    # --------------------------------------------------------
    @app.get("/health")
    def health():
        return {"status": "ok", "env": cfg.ENV}

    @app.get("/")
    def hello():
        return {"message": f"{cfg.APP_NAME} service running."}

    return app


# ------------------------------------------------------------
# 🔧 Bootstrap: everything that must succeed before binding
# ------------------------------------------------------------
def build_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Load the knowledge base and model client; raises on fatal misconfiguration."""
    cfg = app_settings or default_settings
    model_client = build_model_client(cfg)
    knowledge_base = load_knowledge_base(cfg.KNOWLEDGE_BASE_PATH)
    return create_app(ScriptRelay(model_client, knowledge_base), cfg)


def main(app_settings: Optional[Settings] = None) -> None:
    cfg = app_settings or default_settings
    setup_logging(cfg.LOG_LEVEL)

    try:
        app = build_app(cfg)
    except MissingCredentialError as e:
        logger.error("CRITICAL ERROR: %s", e)
        sys.exit(1)
    except KnowledgeBaseError as e:
        logger.error("CRITICAL ERROR: Failed to load or parse %s: %s", e.path, e.reason)
        sys.exit(1)
    except ValueError as e:
        logger.error("CRITICAL ERROR: %s", e)
        sys.exit(1)

    uvicorn.run(app, host=cfg.HOST, port=cfg.PORT, log_level=cfg.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
