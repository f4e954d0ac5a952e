"""DynDNS update responder: validation, provider call, response and request log."""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional

from dyndnsr53.core import codes
from dyndnsr53.core.models import RequestLogEntry, UpdateResponse
from dyndnsr53.core.validator import (
    UpdateRequest,
    UpdateRequestValidator,
    ValidationFailure,
)
from dyndnsr53.providers.base import NullProvider, RecordProvider
from dyndnsr53.utils.exceptions import (
    ProviderError,
    UpstreamError,
    capture_exception,
)

logger = logging.getLogger(__name__)
request_logger = logging.getLogger("dyndnsr53.requests")

RequestLogger = Callable[[RequestLogEntry], None]


def log_request(entry: RequestLogEntry) -> None:
    """Emit a request record as a single JSON log line."""
    request_logger.info("DynDNS request %s", entry.model_dump_json(exclude_none=True))


def _format_duration(seconds: float) -> str:
    return f"{seconds * 1000:.3f}ms"


@dataclass
class DynDNSResponder:
    """
    Answers DynDNS update calls.

    Every call ends with exactly one UpdateResponse and one RequestLogEntry
    handed to ``log_request_fn``, whatever the outcome. Provider failures are
    reported as ``dnserr``; their detail only reaches the log.
    """

    validator: UpdateRequestValidator
    provider: RecordProvider = field(default_factory=NullProvider)
    log_request_fn: RequestLogger = log_request

    async def handle(self, request: UpdateRequest) -> UpdateResponse:
        started = time.perf_counter()
        timestamp = datetime.now(timezone.utc)

        def respond(
            status_code: int,
            message: str,
            error: Optional[str] = None,
            username: str = "",
            fqdn: str = "",
            ip: str = "",
        ) -> UpdateResponse:
            entry = RequestLogEntry(
                timestamp=timestamp,
                remote_addr=request.remote_addr,
                method=request.method,
                user_agent=request.user_agent,
                username=username or None,
                fqdn=fqdn or None,
                ip=ip or None,
                status_code=status_code,
                response=message,
                error_message=error,
                duration=_format_duration(time.perf_counter() - started),
            )
            self.log_request_fn(entry)

            return UpdateResponse(status_code=status_code, message=message)

        result = self.validator.validate(request)

        if isinstance(result, ValidationFailure):
            logger.warning(
                "%s from %s: %s", result.code, request.remote_addr, result.error
            )
            return respond(
                result.status_code,
                result.code,
                result.error,
                username=result.username,
                fqdn=result.fqdn,
                ip=result.ip,
            )

        known = {"username": result.username, "fqdn": result.fqdn, "ip": result.ip}
        logger.info(
            "update request from %s: %s -> %s",
            request.remote_addr,
            result.fqdn,
            result.ip,
        )

        try:
            await self.provider.update_record(result.fqdn, result.ip)
        except UpstreamError as e:
            capture_exception(e, {**known, "provider": self.provider.kind})
            return respond(200, codes.DNSERR, f"provider error: {e}", **known)
        except ProviderError as e:
            logger.warning("rejected update of %s: %s", result.fqdn, e)
            return respond(200, codes.DNSERR, f"provider error: {e}", **known)
        except Exception as e:  # pylint: disable=broad-exception-caught
            # Keep unexpected provider bugs inside the protocol contract
            capture_exception(e, {**known, "provider": self.provider.kind})
            return respond(200, codes.DNSERR, f"provider error: {e}", **known)

        good = codes.with_ip(codes.GOOD, result.ip)

        if isinstance(self.provider, NullProvider):
            return respond(200, good, "no provider configured", **known)

        return respond(200, good, **known)
