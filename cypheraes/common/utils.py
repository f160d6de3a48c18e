"""Helper signatures: hex_preview, sha256_hex, show_bytes."""

import hashlib
from typing import Optional

from cypheraes.common.errors import DecodeOutputNotRepresentable


def sha256_hex(data: bytes) -> str:
    """Returns the SHA-256 hash of data as a hex string."""
    return hashlib.sha256(data).hexdigest()


def hex_preview(data: bytes, limit: Optional[int] = 64) -> str:
    """Hex of at most `limit` bytes, with a marker when truncated."""
    if limit is None or len(data) <= limit:
        return data.hex()
    return f"{data[:limit].hex()}... ({len(data)} bytes)"


def show_bytes(data: bytes, how: str) -> str:
    """
    Renders decrypted bytes for the console.

    how: "hex", "text" (strict UTF-8) or "lossy" (U+FFFD for bad sequences)
    Raises DecodeOutputNotRepresentable for "text" on non-UTF-8 data.
    """
    if how == "hex":
        return data.hex()
    if how == "lossy":
        return data.decode("utf-8", errors="replace")
    if how == "text":
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeOutputNotRepresentable(
                f"Output is not valid UTF-8 (byte {e.start}); it may be a binary file"
            ) from e
    raise ValueError(f"Unknown display mode: {how}")
