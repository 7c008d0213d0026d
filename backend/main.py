"""
Image Gateway entry point.

Run with `python main.py`, or through an ASGI server using the factory:

    uvicorn --factory main:create_app --port 3000
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, load_settings
from app.errors import (
    InvalidInput,
    ProviderError,
    handle_invalid_input,
    handle_provider_error,
)
from app.routers import health, images
from app.services.storage import ImageKitGateway, MediaGateway

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None, gateway: Optional[MediaGateway] = None
) -> FastAPI:
    """
    Create the FastAPI application.

    Settings are only loaded when no gateway is supplied, so a missing
    ImageKit key aborts startup while tests can inject a fake gateway.
    """
    if gateway is None:
        settings = settings or load_settings()
        gateway = ImageKitGateway.from_settings(settings)

    app = FastAPI(
        title="Image Gateway",
        description="Upload, list, fetch and delete images hosted on ImageKit",
        version="1.0.0",
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.gateway = gateway

    # Include routers
    app.include_router(health.router)
    app.include_router(images.router)

    app.add_exception_handler(InvalidInput, handle_invalid_input)
    app.add_exception_handler(ProviderError, handle_provider_error)

    return app


if __name__ == "__main__":
    import uvicorn

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(settings)
    logger.info("Server is running on http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
