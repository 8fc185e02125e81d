"""Wake-on-LAN schemas — validated target and API responses."""

from pydantic import BaseModel, Field, field_validator

from wakegate.utils.mac import parse_mac
from wakegate.utils.wol import port_or_default


class WakeTarget(BaseModel):
    """One WoL target, validated at configuration time."""
    mac: str
    host: str
    port: int = Field(default=0, ge=0, le=65535)

    @field_validator("mac")
    @classmethod
    def _check_mac(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("MAC must be specified")
        parse_mac(value)
        return value

    @field_validator("host")
    @classmethod
    def _check_host(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("IP/host must be specified")
        return value

    @property
    def effective_port(self) -> int:
        return port_or_default(self.port)


class WolTargetResponse(BaseModel):
    """Configured target as exposed by the API."""
    mac: str
    host: str
    port: int
    effective_port: int


class WolResponse(BaseModel):
    """Result of a manual wake request."""
    sent: bool
    target: str
    error: str | None = None
