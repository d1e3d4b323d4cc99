"""
FastAPI app entrypoint.

Chats routed to Ollama / Hugging Face by model, plus gaming-service integrations (Steam games lookup).
All state is in memory and lives as long as the process.
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load .env from backend/ before any app code
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from app.api.deps import Services, build_services
from app.api.routes import chat, integration
from app.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

API_NAME = "LLM Server API"
API_VERSION = "1.0.0"

# CORS: dev origins + optional CORS_ORIGINS env (comma-separated) for production frontend
_DEV_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def _cors_origins() -> list[str]:
    origins = list(_DEV_ORIGINS)
    if settings.cors_origins:
        origins.extend(o.strip() for o in settings.cors_origins.split(",") if o.strip())
    return origins


def create_app(services: Services | None = None) -> FastAPI:
    """Build the app. Pass services to inject stores/providers (tests); otherwise built from settings at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "services", None) is None:
            app.state.services = build_services(settings)
        providers = [p.value for p in app.state.services.registry.list_providers()]
        logger.info(
            "Backend ready on port %s; providers=%s default=%s",
            settings.port,
            providers,
            app.state.services.catalog.default_provider.value,
        )
        yield
        logger.info("Shutting down server gracefully")

    app = FastAPI(title=API_NAME, version=API_VERSION, lifespan=lifespan)
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(chat.router, prefix="/chats", tags=["chats"])
    app.include_router(integration.router, prefix="/integration", tags=["integration"])

    @app.get("/")
    def root():
        """API information."""
        return {
            "name": API_NAME,
            "version": API_VERSION,
            "description": "Chat with Ollama / Hugging Face models and link gaming services",
            "docs": "/docs",
        }

    @app.get("/hello")
    def hello():
        """Simple greeting, handy as a liveness check from the frontend."""
        return {
            "message": "Hello from LLM Server!",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status": "success",
        }

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port)
