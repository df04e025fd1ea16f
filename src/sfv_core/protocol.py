"""SFV manifest format constants.

Single source of truth for the line grammar and hashing parameters.
Parser and verifier must remain synchronized on these values.
"""

# Line grammar
COMMENT_PREFIX = ";"
ENTRY_DELIMITER = " "  # Split on the first occurrence only

# Manifests are read as text; undecodable filename bytes are carried through.
MANIFEST_ENCODING = "utf-8"
MANIFEST_ERRORS = "surrogateescape"

# Checksum bounds
CRC32_MAX = 0xFFFFFFFF
CRC32_HEX_WIDTH = 8

# Streaming read size for data files
CHUNK_SIZE = 4096
