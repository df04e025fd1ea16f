"""SFV Core - manifest parsing and CRC32 verification."""
from .errors import EmptyManifestError, InvalidChecksumError, MalformedEntryError, SFVError
from .model import ChecksumEntry, Manifest
from .parser import parse, parse_entry, parse_lines
from .verifier import compute_entry, file_exists, manifest_exists, verify_entry, verify_manifest

__all__ = [
    "ChecksumEntry",
    "Manifest",
    "SFVError",
    "MalformedEntryError",
    "InvalidChecksumError",
    "EmptyManifestError",
    "parse",
    "parse_entry",
    "parse_lines",
    "compute_entry",
    "verify_entry",
    "verify_manifest",
    "file_exists",
    "manifest_exists",
]
