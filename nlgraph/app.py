"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from nlgraph.api.routers import api_router, mock_data_router
from nlgraph.config.settings import Settings, get_settings
from nlgraph.infrastructure.cache.schema_cache import SchemaCache
from nlgraph.infrastructure.logging.logger import setup_logging
from nlgraph.orchestrator.pipeline import PipelineOrchestrator

settings = get_settings()

setup_logging(
    level=settings.log_level,
    json_output=not settings.debug,
    silence_noisy_loggers=True,
)

logger = logging.getLogger(__name__)


def _validate_startup_config(settings: Settings) -> None:
    """Validate required configuration at startup."""
    if not settings.openai_api_key:
        logger.warning("No OpenAI API key configured (openai_api_key) - translation will fail")
    if not settings.mcp_endpoint:
        logger.warning("mcp_endpoint is empty - query execution will fail")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown lifecycle."""
    logger.info("Starting NLGraph pipeline")
    _validate_startup_config(settings)

    # One schema cache for the whole process, shared by every request
    orchestrator = PipelineOrchestrator.from_settings(settings, schema_cache=SchemaCache())
    app.state.orchestrator = orchestrator
    logger.info("Pipeline initialised (execution endpoint: %s)", settings.mcp_endpoint)

    yield
    logger.info("Shutting down NLGraph pipeline")
    await orchestrator.close()


app = FastAPI(
    title="NLGraph",
    description="Natural language to GraphQL pipeline with visualization suggestions",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

app.include_router(api_router, prefix="/api")

if settings.enable_mock_data_service:
    app.include_router(mock_data_router, prefix="/api", tags=["mock-data"])
