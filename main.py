"""Main entry point for the Slackline FastAPI application.

Slackline relays messages posted in one Slack channel to every channel
linked with it, across teams.

To run the development server:
    uv run uvicorn main:app --reload

To run in production:
    PORT=8000 uv run python main.py
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from api.dependencies import get_relay, initialize_relay, shutdown_relay
from api.exceptions import generic_exception_handler, runtime_error_handler
from api.models import HealthResponse, ServiceInfoResponse
from api.routes import bridge as bridge_routes
from models.config import load_settings
from models.exceptions import ConfigurationError

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the relay before serving and release it on shutdown.

    Any configuration error propagates and aborts startup.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs at INFO, and webhook URLs embed secrets.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger.info("Starting Slackline, building relay...")
    initialize_relay(settings)
    logger.info("Relay ready")

    yield

    logger.info("Shutting down Slackline")
    shutdown_relay()


app = FastAPI(
    title="Slackline",
    description="Relays Slack messages between linked channels across teams",
    version=__version__,
    lifespan=lifespan,
)

# Order matters: specific exceptions before general ones
app.add_exception_handler(RuntimeError, runtime_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(bridge_routes.router)


@app.get("/", response_model=ServiceInfoResponse)
async def root():
    """Root endpoint - returns a welcome message and configuration counts."""
    relay = get_relay()
    return ServiceInfoResponse(
        message="Slackline is relaying",
        version=__version__,
        teams=len(relay.registry),
        channel_groups=len(relay.groups),
    )


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint for monitoring."""
    return HealthResponse(status="healthy")


def run() -> None:
    """Serve the app on ``0.0.0.0:$PORT``.

    Raises:
        ConfigurationError: If $PORT is unset or the configuration is invalid.
    """
    settings = load_settings()
    if settings.port is None:
        raise ConfigurationError("$PORT must be set")

    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
