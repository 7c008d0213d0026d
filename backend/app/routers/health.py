from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.dependencies import get_gateway
from app.services.storage import MediaGateway

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
def liveness():
    return "ok"


@router.get("/imagekit-auth")
def imagekit_auth(gateway: MediaGateway = Depends(get_gateway)) -> Dict[str, Any]:
    """
    Authentication parameters (token, expire, signature) for the client-side ImageKit SDK.
    """
    return gateway.get_auth_params()
