"""VocaLingo FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vocalingo.config import Settings, settings as default_settings
from vocalingo.routes import languages, pronunciation
from vocalingo.services.model_invoker import TextGenerator, build_generator
from vocalingo.services.pronunciation_checker import PronunciationChecker

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(
    generator: TextGenerator | None = None,
    settings: Settings = default_settings,
) -> FastAPI:
    """Build the API.

    The model client is created once in the lifespan unless *generator* is
    given (tests pass a stub here).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup / shutdown lifecycle."""
        gen = generator if generator is not None else build_generator(settings)
        app.state.checker = PronunciationChecker(
            gen, strict_schema=settings.STRICT_FEEDBACK_SCHEMA
        )
        yield

    app = FastAPI(
        title="VocaLingo API",
        description="Pronunciation feedback backed by a generative language model",
        version="0.1.0",
        lifespan=lifespan,
    )

    # ── CORS ────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routes ──────────────────────────────────────────────────
    app.include_router(pronunciation.router, prefix="/api")
    app.include_router(languages.router, prefix="/api")

    @app.get("/api/health")
    async def health_check():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    configure_logging(default_settings.LOG_LEVEL)
    logger.info("Server running on port %d", default_settings.PORT)
    uvicorn.run(
        app,
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
