"""Custom exceptions and error handling utilities."""

import logging
from typing import Optional

import sentry_sdk

from dyndnsr53.core.config import get_settings

logger = logging.getLogger(__name__)


class DynDNSError(Exception):
    """Base exception for dyndnsr53 errors."""


class ConfigurationError(DynDNSError):
    """Startup configuration is invalid."""


class ProviderError(DynDNSError):
    """A record provider could not apply an update."""


class InvalidArgumentError(ProviderError):
    """FQDN or IP is empty or malformed."""


class ZoneMismatchError(ProviderError):
    """FQDN does not belong to the provider's hosted zone."""


class ZoneLookupFailedError(ProviderError):
    """Hosted zone could not be resolved while building a provider."""


class UpstreamError(ProviderError):
    """The upstream DNS service rejected or failed the change."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


def capture_exception(
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "error",
) -> None:
    """
    Capture exception to Sentry if configured, otherwise log it.

    Args:
        exception: The exception to capture
        context: Additional context to include
        level: Log level ('error', 'warning', 'info')
    """
    settings = get_settings()

    # Log locally
    log_func = getattr(logger, level, logger.error)
    log_func("%s: %s", type(exception).__name__, exception, exc_info=exception)

    # Send to Sentry if configured
    if settings.sentry_dsn:
        if context:
            with sentry_sdk.new_scope() as scope:
                for key, value in context.items():
                    scope.set_extra(key, value)
                sentry_sdk.capture_exception(exception)
        else:
            sentry_sdk.capture_exception(exception)
