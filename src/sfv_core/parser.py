"""SFV manifest parser.

Grammar, per line after trimming surrounding whitespace:

- empty: skipped
- starts with ``;``: comment, skipped
- otherwise ``<filename> <hex-checksum>``, split on the first space

The first bad line aborts the parse; no partial manifest is returned.
"""
from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path
from warnings import warn

from .errors import InvalidChecksumError, MalformedEntryError
from .model import ChecksumEntry, Manifest
from .protocol import (
    COMMENT_PREFIX,
    CRC32_MAX,
    ENTRY_DELIMITER,
    MANIFEST_ENCODING,
    MANIFEST_ERRORS,
)

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def _parse_crc32(token: str) -> int:
    if not _HEX_RE.fullmatch(token):
        raise InvalidChecksumError(token, "invalid syntax")
    value = int(token, 16)
    if value > CRC32_MAX:
        raise InvalidChecksumError(token, "value out of range")
    return value


def parse_entry(
    line: str,
    directory: Path,
    lineno: int | None = None,
    raw: str | None = None,
) -> ChecksumEntry:
    """Parse one trimmed, non-comment line into a ChecksumEntry.

    ``raw`` is the untrimmed source line, reported in MalformedEntryError.
    """
    parts = line.split(ENTRY_DELIMITER, 1)
    if len(parts) != 2 or not parts[0].lstrip("/"):
        raise MalformedEntryError(line if raw is None else raw, lineno)
    filename, checksum = parts
    return ChecksumEntry(filename=filename, directory=directory, crc32=_parse_crc32(checksum.lstrip()))


def parse_lines(lines: Iterable[str], directory: Path, source: Path | None = None) -> Manifest:
    """Parse manifest text lines; entry paths resolve against ``directory``."""
    directory = Path(directory)
    entries: list[ChecksumEntry] = []
    seen: set[str] = set()

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        entry = parse_entry(line, directory, lineno, raw=raw.rstrip("\r\n"))

        if entry.filename in seen:
            warn(f"Duplicate entry {entry.filename!r} at line {lineno} of {source or '<memory>'}")
        seen.add(entry.filename)
        entries.append(entry)

    return Manifest(entries=tuple(entries), path=source)


def parse(manifest_path: Path | str) -> Manifest:
    """Read an SFV file into a Manifest.

    Entry paths are joined onto the manifest's absolute directory here, so
    later changes to the working directory do not move them.
    """
    manifest_path = Path(manifest_path)
    directory = manifest_path.absolute().parent
    with open(manifest_path, "r", encoding=MANIFEST_ENCODING, errors=MANIFEST_ERRORS, newline="\n") as f:
        return parse_lines(f, directory, source=manifest_path)
