"""DynDNS protocol routes."""

from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from dyndnsr53.core.auth import StaticCredentialVerifier
from dyndnsr53.core.config import Settings, get_settings
from dyndnsr53.core.responder import DynDNSResponder
from dyndnsr53.core.validator import UpdateRequest, UpdateRequestValidator
from dyndnsr53.providers.base import RecordProvider
from dyndnsr53.providers.factory import build_provider
from dyndnsr53.utils.decorators import sentry_exception_catcher

router = APIRouter()


def build_responder(
    settings: Settings, provider: Optional[RecordProvider] = None
) -> DynDNSResponder:
    """Wire a responder from settings; builds the provider unless one is given."""
    verifier = StaticCredentialVerifier(
        username=settings.dyndns_username,
        password=settings.dyndns_password.get_secret_value(),
    )
    validator = UpdateRequestValidator(
        verifier=verifier,
        user_agent_token=settings.user_agent_token,
    )

    if provider is None:
        provider = build_provider(settings)

    return DynDNSResponder(validator=validator, provider=provider)


# Responder shared by all requests, installed at startup (can be overridden for testing)
_responder: Optional[DynDNSResponder] = None


def get_responder() -> DynDNSResponder:
    """Get the current responder, building it from settings on first use."""
    global _responder  # pylint: disable=global-statement
    if _responder is None:
        _responder = build_responder(get_settings())
    return _responder


def set_responder(responder: DynDNSResponder) -> None:
    """Install a responder (called at startup, useful for testing)."""
    global _responder  # pylint: disable=global-statement
    _responder = responder


def reset_responder() -> None:
    """Drop the installed responder (useful for testing)."""
    global _responder  # pylint: disable=global-statement
    _responder = None


def update_request_from_http(request: Request) -> UpdateRequest:
    """Extract the fields the update protocol needs from a Starlette request."""
    client = request.client
    remote_addr = f"{client.host}:{client.port}" if client else ""

    return UpdateRequest(
        remote_addr=remote_addr,
        method=request.method,
        user_agent=request.headers.get("user-agent", ""),
        auth_header=request.headers.get("authorization", ""),
        fqdn=request.query_params.get("hostname", ""),
        ip=request.query_params.get("myip", ""),
    )


@sentry_exception_catcher
async def nic_update(request: Request) -> PlainTextResponse:
    """DynDNS v2/v3 update endpoint: ``/nic/update?hostname=<fqdn>&myip=<ip>``."""
    responder = get_responder()
    result = await responder.handle(update_request_from_http(request))

    return PlainTextResponse(content=result.body, status_code=result.status_code)


# Plain Starlette route without a method list: every method, including TRACE and
# WebDAV verbs, reaches the responder, which answers non-GET calls with badagent
router.add_route("/nic/update", nic_update, include_in_schema=False)
