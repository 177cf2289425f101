"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from dnsolve.api.healthcheck import router as healthcheck_router
from dnsolve.api.routes import router
from dnsolve.core.config import get_settings
from dnsolve.utils.decorators import init_sentry

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# LOG_LEVEL only applies to our own loggers
logging.getLogger("dnsolve").setLevel(get_settings().log_level_name)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Initialize Sentry and log the effective resolver configuration."""
    settings = get_settings()
    sentry_enabled = init_sentry()

    logger.info("dnsolve listening on %s:%s", settings.api_host, settings.api_port)
    logger.info("Hosts file: %s (TTL %ss)", settings.hosts_file, settings.hosts_ttl)
    logger.info(
        "Resolver timeout=%s lifetime=%s EDNS payload=%s",
        settings.resolver_timeout or "default",
        settings.resolver_lifetime or "default",
        settings.edns_payload,
    )
    logger.info("Sentry: %s", "enabled" if sentry_enabled else "disabled")

    yield

    logger.info("dnsolve shutting down")


app = FastAPI(
    title="dnsolve",
    description="DNS resolution with DoH JSON shaped responses",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router)
app.include_router(healthcheck_router)
