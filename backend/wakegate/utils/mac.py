"""MAC address parsing: colon, dash, dotted and raw hex notations."""

from __future__ import annotations

import re

from wakegate.exceptions import MacFormatError

MAC_LENGTH = 6

_HEX_RE = re.compile(r"[0-9A-Fa-f]+")

# Standard notations, one separator used consistently throughout
_COLON_RE = re.compile(r"[0-9A-Fa-f]{2}(?::[0-9A-Fa-f]{2}){5}")
_DASH_RE = re.compile(r"[0-9A-Fa-f]{2}(?:-[0-9A-Fa-f]{2}){5}")
_DOT_RE = re.compile(r"[0-9A-Fa-f]{4}(?:\.[0-9A-Fa-f]{4}){2}")


class HardwareAddress(bytes):
    """Immutable 6-byte hardware address."""

    def __new__(cls, value: bytes) -> "HardwareAddress":
        if len(value) != MAC_LENGTH:
            raise ValueError(f"Hardware address must be {MAC_LENGTH} bytes, got {len(value)}")
        return super().__new__(cls, value)

    def __str__(self) -> str:
        return ":".join(f"{b:02x}" for b in self)

    def __repr__(self) -> str:
        return f"HardwareAddress('{self}')"


def _parse_standard(text: str) -> HardwareAddress | None:
    """Strict notations: aa:bb:cc:dd:ee:ff, aa-bb-cc-dd-ee-ff, aabb.ccdd.eeff."""
    if _COLON_RE.fullmatch(text) or _DASH_RE.fullmatch(text) or _DOT_RE.fullmatch(text):
        digits = text.replace(":", "").replace("-", "").replace(".", "")
        return HardwareAddress(bytes.fromhex(digits))
    return None


def parse_mac(text: str) -> HardwareAddress:
    """Parse a MAC address into 6 raw bytes, keeping the written byte order.

    Raises:
        MacFormatError: if the text does not decode to exactly 6 bytes.
    """
    hw = _parse_standard(text)
    if hw is not None:
        return hw

    # Fallback: drop separators, expect 12 hex digits
    cleaned = text.replace(":", "").replace("-", "")
    if len(cleaned) != MAC_LENGTH * 2:
        raise MacFormatError(text, f"unexpected length after cleanup: {len(cleaned)}")
    if not _HEX_RE.fullmatch(cleaned):
        raise MacFormatError(text, "non-hexadecimal characters")

    return HardwareAddress(bytes(int(cleaned[i:i + 2], 16) for i in range(0, len(cleaned), 2)))
