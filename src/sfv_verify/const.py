ERRORS = {
  "E_MANIFEST_IO": "Manifest file could not be read",
  "E_MALFORMED_ENTRY": "Manifest entry line is malformed",
  "E_INVALID_CHECKSUM": "Manifest checksum is not a 32-bit hex value",
  "E_EMPTY_MANIFEST": "Manifest contains no checksums",
  "E_FILE_MISSING": "File listed in manifest does not exist",
  "E_FILE_IO": "File listed in manifest could not be read",
  "E_CRC_MISMATCH": "File CRC32 does not match manifest",
}
