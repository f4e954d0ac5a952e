"""DynDNS update request validation pipeline."""

from dataclasses import dataclass
from typing import Union

from dyndnsr53.core import codes
from dyndnsr53.core.auth import CredentialVerifier, parse_basic_auth


@dataclass(frozen=True)
class UpdateRequest:
    """The parts of an inbound HTTP call the update protocol looks at.

    Absent headers and query parameters are represented by empty strings.
    """

    remote_addr: str = ""
    method: str = "GET"
    user_agent: str = ""
    auth_header: str = ""
    fqdn: str = ""
    ip: str = ""


@dataclass(frozen=True)
class ValidatedUpdate:
    """A request that passed every check and may reach the provider."""

    username: str
    fqdn: str
    ip: str


@dataclass(frozen=True)
class ValidationFailure:
    """Terminal outcome of validation.

    ``username``, ``fqdn`` and ``ip`` carry whatever was known when the
    check failed, for logging only.
    """

    code: str
    status_code: int
    error: str
    username: str = ""
    fqdn: str = ""
    ip: str = ""


ValidationResult = Union[ValidatedUpdate, ValidationFailure]


@dataclass(frozen=True)
class UpdateRequestValidator:
    """Classifies an UpdateRequest; the first failing check wins.

    Order: user agent, method, basic auth, hostname, myip. ``validate`` never
    raises and performs no I/O beyond the credential verifier.
    """

    verifier: CredentialVerifier
    user_agent_token: str = "dyndnsr53-client"

    def validate(self, request: UpdateRequest) -> ValidationResult:
        ua = request.user_agent

        if not ua or self.user_agent_token not in ua:
            return ValidationFailure(codes.BADAGENT, 400, "invalid user agent")

        if request.method != "GET":
            return ValidationFailure(codes.BADAGENT, 405, "method not allowed")

        if not request.auth_header.startswith("Basic "):
            return ValidationFailure(
                codes.BADAUTH, 401, "missing authorization header"
            )

        creds = parse_basic_auth(request.auth_header)

        if creds is None:
            return ValidationFailure(
                codes.BADAUTH, 401, "invalid basic auth payload"
            )

        username, password = creds

        if not self.verifier.verify(username, password):
            return ValidationFailure(
                codes.BADAUTH, 401, "invalid credentials"
            )

        if not request.fqdn:
            return ValidationFailure(
                codes.NOFQDN,
                200,
                "missing hostname parameter",
                username=username,
                ip=request.ip,
            )

        if not request.ip:
            return ValidationFailure(
                codes.DNSERR,
                200,
                "missing myip parameter",
                username=username,
                fqdn=request.fqdn,
            )

        return ValidatedUpdate(username=username, fqdn=request.fqdn, ip=request.ip)
