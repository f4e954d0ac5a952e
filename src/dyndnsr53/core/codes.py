"""DynDNS v2/v3 return codes."""

GOOD = "good"
NOCHG = "nochg"
BADAUTH = "badauth"
NOT_DONATOR = "!donator"
NOFQDN = "nofqdn"
NOHOST = "nohost"
NUMHOST = "numhost"
ABUSE = "abuse"
BADAGENT = "badagent"
DNSERR = "dnserr"
EMERGENCY = "911"

# Every code a DynDNS client may receive; only some are produced today.
ALL_CODES = (
    GOOD,
    NOCHG,
    BADAUTH,
    NOT_DONATOR,
    NOFQDN,
    NOHOST,
    NUMHOST,
    ABUSE,
    BADAGENT,
    DNSERR,
    EMERGENCY,
)


def with_ip(code: str, ip: str) -> str:
    """Format an IP-carrying response such as ``good 1.2.3.4``."""
    return f"{code} {ip}"
