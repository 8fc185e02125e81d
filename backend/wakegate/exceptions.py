"""Wake-on-LAN error taxonomy.

Every failure that can happen while sending a magic packet derives from
:class:`WolError`, so triggers can contain them with a single ``except``.
Port range problems are not part of this hierarchy: they are usage mistakes
and surface as ``ValueError`` / pydantic ``ValidationError`` at setup time.
"""

from __future__ import annotations


class WolError(Exception):
    """Base class for send-time Wake-on-LAN failures."""


class MacFormatError(WolError, ValueError):
    """The MAC address text does not decode to 6 bytes."""

    def __init__(self, text: str, reason: str):
        super().__init__(f"Invalid MAC address {text!r}: {reason}")
        self.text = text
        self.reason = reason


class ResolutionError(WolError):
    """The target host/port could not be resolved to a UDP address."""

    def __init__(self, host: str, port: int, reason: str):
        super().__init__(f"Cannot resolve {host!r} port {port}: {reason}")
        self.host = host
        self.port = port


class TransmissionError(WolError):
    """Writing the datagram to the resolved target failed."""

    def __init__(self, target: str, reason: str):
        super().__init__(f"Failed to send magic packet to {target}: {reason}")
        self.target = target
