"""FastAPI application factory."""

import logging
import os
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dressing.application.config import load_pricing_table
from dressing.domain import PricingTable
from dressing.web.exceptions import register_exception_handlers
from dressing.web.routers import quote_router, rates_router

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DRESSING_PRICING_CONFIG"


def _table_from_environment() -> PricingTable:
    config_path = os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        return PricingTable.default()
    logger.info(f"Using pricing configuration {config_path}")
    return load_pricing_table(Path(config_path))


def create_app(table: PricingTable | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        table: Pricing table to serve. When omitted, the file named by the
            DRESSING_PRICING_CONFIG environment variable is loaded, or the
            default price list is used.

    Returns:
        Configured FastAPI application instance.

    Raises:
        ConfigError: If the configured pricing file is missing or invalid.
    """
    app = FastAPI(
        title="Dressing Pricing API",
        description="REST API for tax-inclusive dressing price quotes",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.pricing_table = table or _table_from_environment()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(quote_router, prefix="/api/v1")
    app.include_router(rates_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
