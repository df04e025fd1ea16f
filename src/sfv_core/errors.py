"""SFV parse and verification errors.

I/O failures are not wrapped: they surface as the ``OSError`` raised by
``open`` or ``read``.
"""
from __future__ import annotations

from pathlib import Path


class SFVError(ValueError):
    """Base class for manifest content errors."""


class MalformedEntryError(SFVError):
    """An entry line did not split into a filename and a checksum."""

    def __init__(self, line: str, lineno: int | None = None):
        self.line = line
        self.lineno = lineno
        where = f" (line {lineno})" if lineno is not None else ""
        super().__init__(f"could not parse checksum{where}: {line!r}")


class InvalidChecksumError(SFVError):
    """The checksum field is not base-16 or does not fit in 32 bits."""

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"invalid checksum {token!r}: {reason}")


class EmptyManifestError(SFVError):
    """A manifest with no entries was asked to verify."""

    def __init__(self, path: Path | None = None):
        self.path = path
        super().__init__(f"no checksums found in {path if path is not None else '<memory>'}")
