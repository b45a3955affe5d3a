"""Translator Gateway — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GatewayError → {"message"} / {"errs"} responses
    - CORS configured from settings (not hardcoded)
    - One TranslatorClient per process, created and closed by the lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gateway.api.error_handlers import register_error_handlers
from gateway.api.routes import dictionary, health, languages, translation
from gateway.config import get_settings
from gateway.infrastructure.observability import setup_logging
from gateway.infrastructure.translator_client import TranslatorClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.translator_client = TranslatorClient(settings)
    logger.info(
        f"Translator Gateway started (upstream {settings.translator_endpoint})",
    )
    yield
    await app.state.translator_client.aclose()
    logger.info("Translator Gateway shutting down")


app = FastAPI(
    title="Azure AI Translator API",
    description="Gateway that reads the Azure AI Translator API",
    version="1.0.0",
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(languages.router)
app.include_router(translation.router)
app.include_router(dictionary.router)

register_error_handlers(app)
