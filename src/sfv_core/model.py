"""SFV data model: one ChecksumEntry per manifest line, one Manifest per file."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from . import verifier
from .display import format_crc32
from .errors import InvalidChecksumError, SFVError
from .protocol import CRC32_MAX


@dataclass(frozen=True)
class ChecksumEntry:
    """A filename, its resolved path and the recorded CRC32.

    ``path`` is always ``directory / filename`` and is fixed at construction.
    A leading ``/`` on the filename does not escape ``directory``.
    """

    filename: str
    directory: Path
    crc32: int
    path: Path = field(init=False)

    def __post_init__(self) -> None:
        if not 0 <= self.crc32 <= CRC32_MAX:
            raise InvalidChecksumError(hex(self.crc32), "value out of range")
        relative = self.filename.lstrip("/")
        if not relative:
            raise SFVError(f"empty filename {self.filename!r}")
        object.__setattr__(self, "directory", Path(self.directory))
        object.__setattr__(self, "path", self.directory / relative)

    @property
    def crc32_hex(self) -> str:
        return format_crc32(self.crc32)

    def compute(self) -> int:
        return verifier.compute_entry(self)

    def verify(self) -> bool:
        return verifier.verify_entry(self)

    def exists(self) -> bool:
        return verifier.file_exists(self)


@dataclass
class Manifest:
    entries: tuple[ChecksumEntry, ...] = ()
    path: Path | None = None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ChecksumEntry]:
        return iter(self.entries)

    def verify(self) -> bool:
        return verifier.verify_manifest(self)

    def exists(self) -> bool:
        return verifier.manifest_exists(self)
