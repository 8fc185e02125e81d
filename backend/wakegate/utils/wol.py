"""Wake-on-LAN (WOL) implementation — unicast magic packet over UDP."""

from __future__ import annotations

import socket
from dataclasses import dataclass
from typing import Any

from wakegate.exceptions import ResolutionError, TransmissionError, WolError
from wakegate.utils.mac import MAC_LENGTH, parse_mac

WOL_DEFAULT_PORT = 9
SYNC_STREAM = b"\xff" * 6
MAC_REPEAT = 16
MAGIC_PACKET_LENGTH = len(SYNC_STREAM) + MAC_LENGTH * MAC_REPEAT  # 102


@dataclass(frozen=True)
class WolResult:
    """Outcome of a single best-effort send."""
    ok: bool
    target: str
    error: WolError | None = None

    def __bool__(self) -> bool:
        return self.ok


def build_magic_packet(hw: bytes) -> bytes:
    """Magic packet: 6x 0xFF + 16x hardware address (102 bytes)."""
    if len(hw) != MAC_LENGTH:
        raise ValueError(f"Hardware address must be {MAC_LENGTH} bytes, got {len(hw)}")
    return SYNC_STREAM + bytes(hw) * MAC_REPEAT


def port_or_default(port: int) -> int:
    """Map the unset port (0) to UDP/9; reject anything outside [0, 65535]."""
    if port < 0 or port > 65535:
        raise ValueError(f"Invalid port {port}")
    return port or WOL_DEFAULT_PORT


def format_target(host: str, port: int) -> str:
    if ":" in host and not host.startswith("["):
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def resolve_target(host: str, port: int) -> tuple[int, Any]:
    """Resolve host (IPv4/IPv6 literal or DNS name) to (family, sockaddr).

    Resolution happens on every call; results are never cached.
    """
    name = host.strip()
    if name.startswith("[") and name.endswith("]"):
        name = name[1:-1]
    if not name:
        raise ResolutionError(host, port, "empty host")

    try:
        infos = socket.getaddrinfo(name, port, type=socket.SOCK_DGRAM)
    except (socket.gaierror, UnicodeError) as e:
        raise ResolutionError(host, port, str(e)) from e
    if not infos:
        raise ResolutionError(host, port, "no addresses returned")

    family, _type, _proto, _canonname, sockaddr = infos[0]
    return family, sockaddr


def send_magic_packet(mac_address: str, host: str, port: int = WOL_DEFAULT_PORT) -> None:
    """
    Send a Wake-on-LAN magic packet as a single unicast UDP datagram.

    Args:
        mac_address: MAC address, e.g. "AA:BB:CC:DD:EE:FF", "AA-BB-CC-DD-EE-FF" or "AABBCCDDEEFF"
        host: Target IP literal or hostname
        port: UDP port (already defaulted by the caller)

    Raises:
        MacFormatError: MAC text is malformed; nothing is sent.
        ResolutionError: host/port cannot be resolved; nothing is sent.
        TransmissionError: the socket connect/write failed.
    """
    hw = parse_mac(mac_address)
    packet = build_magic_packet(hw)

    family, sockaddr = resolve_target(host, port)
    target = format_target(host, port)

    try:
        with socket.socket(family, socket.SOCK_DGRAM) as sock:
            sock.connect(sockaddr)
            sent = sock.send(packet)
    except OSError as e:
        raise TransmissionError(target, str(e)) from e

    if sent != len(packet):
        raise TransmissionError(target, f"short write ({sent}/{len(packet)} bytes)")


def send_wol(mac_address: str, host: str, port: int = 0) -> WolResult:
    """Best-effort send; WoL failures are returned, never raised.

    A port outside [0, 65535] still raises ``ValueError``.
    """
    port = port_or_default(port)
    target = format_target(host, port)
    try:
        send_magic_packet(mac_address, host, port)
    except WolError as e:
        return WolResult(ok=False, target=target, error=e)
    return WolResult(ok=True, target=target)
