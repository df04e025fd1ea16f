from __future__ import annotations

import os
import zlib
from pathlib import Path

from .protocol import CHUNK_SIZE


def crc32_file(path: Path, chunk_size: int = CHUNK_SIZE) -> int:
    """Stream a file through CRC32 (IEEE) and return the unsigned 32-bit value."""
    checksum = 0
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            checksum = zlib.crc32(chunk, checksum)
    return checksum


def path_exists(path: Path) -> bool:
    # os.path.exists maps every stat failure, permission errors included, to False.
    return os.path.exists(path)
