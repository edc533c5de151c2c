"""
License key generation.

Keys are random bytes rendered as lowercase hex, grouped into
dash-separated blocks of four characters (e.g. ``a1b2-c3d4-...``).
"""

import secrets

from core.domain.exceptions import EntropyError

DEFAULT_KEY_BYTES = 16
BLOCK_SIZE = 4
# Column width of the stored key
MAX_KEY_LENGTH = 100


def format_license_key(hex_key: str, block_size: int = BLOCK_SIZE) -> str:
    """
    Group a hex string into dash-separated blocks.

    Args:
        hex_key: Hex-encoded key material
        block_size: Characters per block

    Returns:
        Formatted key; the last block may be shorter
    """
    return "-".join(
        hex_key[i : i + block_size] for i in range(0, len(hex_key), block_size)
    )


def formatted_key_length(num_bytes: int, block_size: int = BLOCK_SIZE) -> int:
    """Return the length of a formatted key built from num_bytes of entropy."""
    hex_length = num_bytes * 2
    blocks = (hex_length + block_size - 1) // block_size
    return hex_length + max(0, blocks - 1)


# Largest entropy whose formatted key still fits MAX_KEY_LENGTH
MAX_KEY_BYTES = max(
    n for n in range(1, MAX_KEY_LENGTH) if formatted_key_length(n) <= MAX_KEY_LENGTH
)


def generate_license_key(num_bytes: int = DEFAULT_KEY_BYTES) -> str:
    """
    Generate a license key from cryptographically random bytes.

    Args:
        num_bytes: Bytes of entropy; non-positive values fall back to 16

    Returns:
        Generated license key string

    Raises:
        EntropyError: If the OS randomness source is unavailable
    """
    if num_bytes <= 0:
        num_bytes = DEFAULT_KEY_BYTES
    try:
        raw = secrets.token_bytes(num_bytes)
    except (NotImplementedError, OSError) as e:
        raise EntropyError(f"Randomness source unavailable: {e}") from e
    return format_license_key(raw.hex())

