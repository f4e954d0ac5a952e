"""Build the configured record provider."""

from dyndnsr53.core.config import Settings
from dyndnsr53.providers.base import NullProvider, RecordProvider
from dyndnsr53.providers.route53 import Route53Provider, make_route53_client
from dyndnsr53.utils.exceptions import ConfigurationError

SUPPORTED_PROVIDERS = ("route53", "none")


def build_provider(settings: Settings) -> RecordProvider:
    """
    Create the provider named by ``settings.provider``.

    Raises:
        ConfigurationError: unknown provider kind, or route53 without a zone id
        ZoneLookupFailedError: the hosted zone could not be resolved
    """
    kind = settings.provider_kind

    if kind in ("none", ""):
        return NullProvider()

    if kind == "route53":
        if not settings.zone_id:
            raise ConfigurationError("zone id is required when using route53 provider")

        client = make_route53_client(settings.aws_region, settings.provider_timeout)

        return Route53Provider.from_zone_id(
            settings.zone_id, client, ttl=settings.record_ttl
        )

    raise ConfigurationError(
        f"unsupported provider type: {settings.provider} "
        f"(supported providers: {', '.join(SUPPORTED_PROVIDERS)})"
    )
