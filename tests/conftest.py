"""Pytest configuration and fixtures."""

# pylint: disable=redefined-outer-name

import asyncio
import base64
import os
from dataclasses import dataclass, field
from typing import Optional

import boto3
import pytest

from dyndnsr53.core.auth import StaticCredentialVerifier
from dyndnsr53.core.config import Settings
from dyndnsr53.core.validator import UpdateRequestValidator

# Set test environment variables before importing application code
os.environ.setdefault("PROVIDER", "none")
os.environ.setdefault("DYNDNS_USERNAME", "user")
os.environ.setdefault("DYNDNS_PASSWORD", "pass")
os.environ.setdefault("USER_AGENT_TOKEN", "dyndnsr53-client")

CLIENT_UA = "dyndnsr53-client/1.0"


def basic_auth(username: str, password: str) -> str:
    """Build an Authorization header value."""
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return f"Basic {token}"


@dataclass
class FakeProvider:
    """In-memory provider that records calls and upserts into a dict."""

    kind: str = "fake"
    error: Optional[Exception] = None
    calls: list[tuple[str, str]] = field(default_factory=list)
    records: dict[str, str] = field(default_factory=dict)

    @property
    def zone_name(self) -> Optional[str]:
        return "example.com"

    async def update_record(self, fqdn: str, ip: str) -> None:
        self.calls.append((fqdn, ip))
        # yield so concurrent updates interleave
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        self.records[fqdn] = ip


@pytest.fixture
def test_settings():
    """Provide test settings with predictable values."""
    return Settings(
        listen=":8080",
        provider="none",
        dyndns_username="user",
        dyndns_password="pass",
        user_agent_token="dyndnsr53-client",
        sentry_dsn=None,
        _env_file=None,
    )


@pytest.fixture
def validator():
    """Validator accepting user/pass and the dyndnsr53-client agent."""
    return UpdateRequestValidator(
        verifier=StaticCredentialVerifier(username="user", password="pass"),
        user_agent_token="dyndnsr53-client",
    )


@pytest.fixture
def fake_provider():
    """Create a recording provider."""
    return FakeProvider()


@pytest.fixture
def route53_client():
    """Route 53 client with dummy credentials, for use with botocore Stubber."""
    return boto3.client(
        "route53",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
