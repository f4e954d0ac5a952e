"""FastAPI application entry point."""

import asyncio
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from dyndnsr53.api.healthcheck import router as healthcheck_router
from dyndnsr53.api.routes import build_responder, reset_responder, router, set_responder
from dyndnsr53.core.config import get_settings
from dyndnsr53.utils.decorators import init_sentry
from dyndnsr53.version import __version__

# Configure logging for the application
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# Set dyndnsr53 loggers to the configured level
logging.getLogger("dyndnsr53").setLevel(get_settings().log_level.upper())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan handler."""
    # Startup
    sentry_enabled = init_sentry()
    settings = get_settings()

    # A provider that cannot be built must stop startup before serving begins
    responder = await asyncio.to_thread(build_responder, settings)
    set_responder(responder)

    logger.info("dyndnsr53 %s starting...", __version__)
    logger.info("Listen: %s", settings.listen)
    logger.info("Provider: %s", responder.provider.kind)
    if responder.provider.zone_name:
        logger.info("Zone: %s (%s)", responder.provider.zone_name, settings.zone_id)
    else:
        logger.warning("No provider configured - running in test mode")
    logger.info("Sentry: %s", "enabled" if sentry_enabled else "disabled")

    if not settings.dyndns_username or not settings.dyndns_password.get_secret_value():
        logger.warning("DYNDNS_USERNAME/DYNDNS_PASSWORD unset: every update will get badauth")

    yield

    # Shutdown
    logger.info("dyndnsr53 shutting down...")
    reset_responder()


app = FastAPI(
    title="dyndnsr53",
    description="DynDNS-compatible update server for AWS Route 53",
    version=__version__,
    lifespan=lifespan,
)

# Include API routes
app.include_router(router)
app.include_router(healthcheck_router)
