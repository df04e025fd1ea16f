import zlib
from pathlib import Path

import pytest


@pytest.fixture
def write_sfv(tmp_path):
    """Write data files plus an SFV listing them; returns the manifest path.

    ``files`` maps filename to bytes. ``crcs`` overrides the recorded value
    for a filename (as an int), otherwise the real CRC32 is recorded.
    """

    def _write(files: dict, crcs: dict | None = None, name: str = "files.sfv", extra: str = "") -> Path:
        crcs = crcs or {}
        lines = ["; generated for tests"]
        for fn, data in files.items():
            if data is not None:
                (tmp_path / fn).write_bytes(data)
            crc = crcs.get(fn, zlib.crc32(data or b""))
            lines.append(f"{fn} {crc:08X}")
        sfv = tmp_path / name
        sfv.write_text("\n".join(lines) + "\n" + extra, encoding="utf-8")
        return sfv

    return _write
