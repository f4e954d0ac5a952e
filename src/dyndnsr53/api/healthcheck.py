"""Health check API endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from dyndnsr53.api.routes import get_responder
from dyndnsr53.core.responder import DynDNSResponder
from dyndnsr53.version import __version__

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    version: str
    provider: str
    zone_name: Optional[str] = None


@router.get("/healthcheck", response_model=HealthResponse)
async def health_check(
    responder: DynDNSResponder = Depends(get_responder),
) -> HealthResponse:
    """
    Health check endpoint (no auth required).

    Reports the active provider kind and, for zone-scoped providers, the
    hosted zone it is bound to.
    """
    return HealthResponse(
        status="ok",
        version=__version__,
        provider=responder.provider.kind,
        zone_name=responder.provider.zone_name,
    )
