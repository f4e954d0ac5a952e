"""DNS name normalization and hosted-zone membership."""

import dns.exception
import dns.name

from dyndnsr53.utils.exceptions import InvalidArgumentError, ZoneMismatchError


def normalize_name(name: str) -> str:
    """Lowercase a DNS name and strip surrounding whitespace and a trailing dot."""
    return name.strip().lower().removesuffix(".")


def check_zone_membership(fqdn: str, zone: str) -> None:
    """
    Ensure ``fqdn`` is the apex of ``zone`` or a subdomain of it at any depth.

    Raises:
        InvalidArgumentError: fqdn is empty
        ZoneMismatchError: fqdn is malformed, outside the zone, or repeats
            the zone suffix (e.g. ``home.zone.tld.zone.tld``)
    """
    clean_fqdn = normalize_name(fqdn)
    clean_zone = normalize_name(zone)

    if not clean_fqdn:
        raise InvalidArgumentError(f"FQDN {fqdn!r} is empty")

    try:
        name = dns.name.from_text(clean_fqdn)
        zone_name = dns.name.from_text(clean_zone)
    except dns.exception.DNSException as e:
        raise ZoneMismatchError(
            f"FQDN {fqdn} is not a well-formed name in hosted zone {zone}: {e}"
        ) from e

    if not name.is_subdomain(zone_name):
        raise ZoneMismatchError(f"FQDN {fqdn} does not belong to hosted zone {zone}")

    if clean_fqdn.count(clean_zone) > 1:
        raise ZoneMismatchError(
            f"FQDN {fqdn} contains zone name {zone} multiple times"
        )
