"""Per-entry and per-manifest CRC32 verification."""
from __future__ import annotations

from typing import TYPE_CHECKING

from .crc import crc32_file, path_exists
from .errors import EmptyManifestError

if TYPE_CHECKING:
    from .model import ChecksumEntry, Manifest


def compute_entry(entry: ChecksumEntry) -> int:
    """Return the CRC32 of the entry's file as it is on disk now."""
    return crc32_file(entry.path)


def verify_entry(entry: ChecksumEntry) -> bool:
    """Return True iff the file's CRC32 matches the recorded value.

    A mismatch is an ordinary False. A file that cannot be opened or read
    raises OSError.
    """
    return compute_entry(entry) == entry.crc32


def verify_manifest(manifest: Manifest) -> bool:
    """Verify entries in order, stopping at the first mismatch.

    Raises EmptyManifestError for a manifest with no entries. The first
    OSError from any entry propagates unchanged.
    """
    if not manifest.entries:
        raise EmptyManifestError(manifest.path)
    for entry in manifest.entries:
        if not verify_entry(entry):
            return False
    return True


def file_exists(entry: ChecksumEntry) -> bool:
    return path_exists(entry.path)


def manifest_exists(manifest: Manifest) -> bool:
    """True if every file named in the manifest exists."""
    return all(file_exists(entry) for entry in manifest.entries)
