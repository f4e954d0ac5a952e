"""Record provider capability and the no-op provider."""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from dyndnsr53.utils.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class RecordProvider(Protocol):
    """Protocol for backends that point a DNS name at an IP address.

    Implementations must tolerate concurrent ``update_record`` calls and keep
    any zone binding immutable after construction.
    """

    kind: str

    @property
    def zone_name(self) -> Optional[str]: ...

    async def update_record(self, fqdn: str, ip: str) -> None:
        """Create or replace the record for ``fqdn`` with ``ip``.

        Raises a ProviderError subclass on failure.
        """
        ...


def require_arguments(fqdn: str, ip: str) -> None:
    """Reject empty fqdn/ip before any provider work."""
    if not fqdn or not ip:
        raise InvalidArgumentError("fqdn and ip must not be empty")


@dataclass(frozen=True)
class NullProvider:
    """Accepts every update and changes nothing. Used for tests and staging."""

    kind: str = "none"

    @property
    def zone_name(self) -> Optional[str]:
        return None

    async def update_record(self, fqdn: str, ip: str) -> None:
        require_arguments(fqdn, ip)
        logger.debug("null provider: skipping update of %s to %s", fqdn, ip)
