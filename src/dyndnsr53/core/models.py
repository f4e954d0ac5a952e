"""Pydantic models for request logging and responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class RequestLogEntry(BaseModel):
    """One structured record per DynDNS request, emitted after responding."""

    timestamp: datetime
    remote_addr: str
    method: str
    user_agent: str
    username: Optional[str] = None
    fqdn: Optional[str] = None
    ip: Optional[str] = None
    status_code: int
    response: str
    error_message: Optional[str] = None
    duration: str


class UpdateResponse(BaseModel):
    """HTTP status and protocol message for one update call."""

    status_code: int
    message: str

    @property
    def body(self) -> str:
        """Return the wire body: the message followed by a newline."""
        return self.message + "\n"
