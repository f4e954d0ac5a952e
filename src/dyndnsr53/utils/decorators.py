"""Decorators for error handling and monitoring."""

import functools
from typing import Awaitable, Callable, TypeVar

import sentry_sdk

from dyndnsr53.core.config import get_settings
from dyndnsr53.version import __version__

F = TypeVar("F", bound=Callable[..., Awaitable])


def sentry_exception_catcher(func: F) -> F:
    """
    Report exceptions escaping an async route handler to Sentry, then re-raise.

    Only reports if Sentry is configured (SENTRY_DSN is set).
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            if get_settings().sentry_dsn:
                with sentry_sdk.new_scope() as scope:
                    scope.set_tag("handler", func.__name__)
                    sentry_sdk.capture_exception(e)
            raise

    return wrapper  # type: ignore


def init_sentry() -> bool:
    """Initialize Sentry SDK if configured. Returns True when reporting is on."""
    settings = get_settings()

    if not settings.sentry_dsn:
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment,
        release=f"dyndnsr53@{__version__}",
        traces_sample_rate=settings.sentry_traces_sample_rate,
        send_default_pii=False,
    )
    sentry_sdk.set_tag("provider", settings.provider_kind)

    return True
