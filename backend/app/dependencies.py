from fastapi import Request

from app.services.storage import MediaGateway


def get_gateway(request: Request) -> MediaGateway:
    """The gateway instance the application was created with."""
    return request.app.state.gateway
