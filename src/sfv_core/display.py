"""Text forms of manifest values for reports and terminals."""
from __future__ import annotations

from .protocol import CRC32_HEX_WIDTH, MANIFEST_ENCODING, MANIFEST_ERRORS


def format_crc32(value: int) -> str:
    return f"{value:0{CRC32_HEX_WIDTH}x}"


def display_text(value: object) -> str:
    """Return ``value`` as valid Unicode.

    Bytes that were carried through as lone surrogates come back out as
    ``\\xNN`` escapes instead of breaking strict encoders.
    """
    raw = str(value).encode(MANIFEST_ENCODING, MANIFEST_ERRORS)
    return raw.decode(MANIFEST_ENCODING, "backslashreplace")
