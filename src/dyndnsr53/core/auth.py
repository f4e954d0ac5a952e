"""HTTP Basic credential parsing and verification."""

import base64
import binascii
import hmac
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

BASIC_PREFIX = "Basic "


class CredentialVerifier(Protocol):
    """Protocol for checking a username/password pair."""

    def verify(self, username: str, password: str) -> bool: ...


@dataclass(frozen=True)
class StaticCredentialVerifier:
    """Accepts exactly one configured username/password pair.

    An empty configured username or password never authenticates anyone.
    """

    username: str
    password: str

    def verify(self, username: str, password: str) -> bool:
        if not self.username or not self.password:
            return False

        user_ok = hmac.compare_digest(username.encode(), self.username.encode())
        pass_ok = hmac.compare_digest(password.encode(), self.password.encode())

        return user_ok and pass_ok


def parse_basic_auth(header: str) -> Optional[Tuple[str, str]]:
    """
    Decode an ``Authorization: Basic ...`` header value.

    Returns (username, password), or None when the header is missing, uses a
    different scheme, is not valid base64, or has no ``:`` separator.
    """
    if not header or not header.startswith(BASIC_PREFIX):
        return None

    try:
        payload = base64.b64decode(header[len(BASIC_PREFIX) :], validate=True)
        decoded = payload.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None

    username, sep, password = decoded.partition(":")

    if not sep:
        return None

    return username, password
