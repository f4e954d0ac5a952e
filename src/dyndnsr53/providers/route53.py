"""AWS Route 53 record provider scoped to a single hosted zone."""

import asyncio
import ipaddress
import logging
from dataclasses import dataclass
from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from dyndnsr53.dns.names import check_zone_membership, normalize_name
from dyndnsr53.providers.base import require_arguments
from dyndnsr53.utils.exceptions import (
    InvalidArgumentError,
    UpstreamError,
    ZoneLookupFailedError,
)

logger = logging.getLogger(__name__)

DEFAULT_TTL = 60

# Errors raised by botocore for API rejections and transport failures
AWS_ERRORS = (ClientError, BotoCoreError)


def make_route53_client(region: Optional[str] = None, timeout: float = 10.0) -> Any:
    """Build a Route 53 client from the default AWS credential chain.

    ``timeout`` bounds both connecting and waiting for a response, in seconds.
    """
    session = boto3.session.Session(region_name=region)
    config = Config(connect_timeout=timeout, read_timeout=timeout)

    return session.client("route53", config=config)


@dataclass(frozen=True)
class Route53Provider:
    """Upserts A records inside one Route 53 hosted zone.

    Build instances with ``from_zone_id``; the zone name is looked up once and
    never changes afterwards.
    """

    client: Any
    zone_id: str
    hosted_zone_name: str
    ttl: int = DEFAULT_TTL
    kind: str = "route53"

    @classmethod
    def from_zone_id(
        cls, zone_id: str, client: Any, ttl: int = DEFAULT_TTL
    ) -> "Route53Provider":
        """Resolve ``zone_id`` to its zone name and bind a provider to it."""
        if not zone_id:
            raise ZoneLookupFailedError("zone id must not be empty")

        try:
            resp = client.get_hosted_zone(Id=zone_id)
        except AWS_ERRORS as e:
            raise ZoneLookupFailedError(
                f"failed to get hosted zone {zone_id}: {e}"
            ) from e

        zone_name = normalize_name(resp["HostedZone"]["Name"])
        logger.info("Bound to Route 53 hosted zone %s (%s)", zone_name, zone_id)

        return cls(client=client, zone_id=zone_id, hosted_zone_name=zone_name, ttl=ttl)

    @property
    def zone_name(self) -> Optional[str]:
        return self.hosted_zone_name

    def validate_fqdn(self, fqdn: str) -> None:
        """Ensure the FQDN belongs to the bound hosted zone."""
        check_zone_membership(fqdn, self.hosted_zone_name)

    async def update_record(self, fqdn: str, ip: str) -> None:
        require_arguments(fqdn, ip)
        self.validate_fqdn(fqdn)

        try:
            ipaddress.IPv4Address(ip)
        except ValueError as e:
            raise InvalidArgumentError(f"{ip} is not an IPv4 address") from e

        # boto3 is blocking; keep the event loop free while Route 53 answers
        await asyncio.to_thread(self._upsert, normalize_name(fqdn), ip)

    def _upsert(self, fqdn: str, ip: str) -> None:
        change_batch = {
            "Changes": [
                {
                    "Action": "UPSERT",
                    "ResourceRecordSet": {
                        "Name": fqdn,
                        "Type": "A",
                        "TTL": self.ttl,
                        "ResourceRecords": [{"Value": ip}],
                    },
                }
            ]
        }

        try:
            resp = self.client.change_resource_record_sets(
                HostedZoneId=self.zone_id, ChangeBatch=change_batch
            )
        except AWS_ERRORS as e:
            raise UpstreamError(f"route53 change for {fqdn} failed: {e}", cause=e) from e

        logger.info(
            "Route 53 accepted UPSERT %s A %s (change %s)",
            fqdn,
            ip,
            resp.get("ChangeInfo", {}).get("Id", "?"),
        )
