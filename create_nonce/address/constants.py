"""RLP constants for CREATE address derivation."""

# Address width in bytes
ADDRESS_SIZE = 20

# Keccak-256 digest width in bytes
DIGEST_SIZE = 32

# RLP prefixes
STRING_OFFSET = 0x80  # short string: 0x80 + length
LIST_OFFSET = 0xC0  # short list: 0xc0 + payload length
EMPTY_STRING = STRING_OFFSET  # integer zero encodes as the empty string
SINGLE_BYTE_MAX = 0x7F  # values up to this self-encode

# Address field prefix (0x80 + 20)
ADDRESS_PREFIX = STRING_OFFSET + ADDRESS_SIZE

# Widest nonce the encoder handles; larger nonces are masked to this width
MAX_NONCE_BYTES = 4
MAX_NONCE = (1 << (8 * MAX_NONCE_BYTES)) - 1
