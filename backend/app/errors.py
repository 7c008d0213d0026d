"""Error taxonomy and the handlers that turn it into JSON responses."""

from fastapi import Request, status
from fastapi.responses import JSONResponse


class ImageGatewayError(Exception):
    """Base class for every error raised by this service."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ImageGatewayError):
    """A required request field is missing or malformed."""


class ProviderError(ImageGatewayError):
    """Any failure reported by the media provider, including not-found and timeouts."""

    def __init__(self, message: str, operation: str = ""):
        super().__init__(message)
        self.operation = operation


class ConfigurationError(ImageGatewayError, ValueError):
    """Required process configuration is missing."""


async def handle_invalid_input(request: Request, exc: InvalidInput) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": exc.message},
    )


async def handle_provider_error(request: Request, exc: ProviderError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.message},
    )
