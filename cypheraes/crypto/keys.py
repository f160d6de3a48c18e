"""32-byte AES-256 key files: load, check, generate."""

import os
from pathlib import Path

from cypheraes.common.errors import KeyLengthError

# AES-256 uses 32-byte keys
KEY_SIZE = 32


def check_key(key: bytes) -> bytes:
    """
    Boundary check between the driver and the cipher core.
    Only the length is validated, never the key's strength.
    """
    if len(key) != KEY_SIZE:
        raise KeyLengthError(
            f"Key must be {KEY_SIZE} bytes (256 bit), got {len(key)}"
        )
    return bytes(key)


def load_key(key_path) -> bytes:
    """Reads a raw 32-byte key file."""
    with open(key_path, "rb") as f:
        key_data = f.read()
    return check_key(key_data)


def generate_key() -> bytes:
    """Returns 32 random bytes from the OS CSPRNG."""
    return os.urandom(KEY_SIZE)


def save_key(key_path, key: bytes, overwrite: bool = False) -> Path:
    """
    Writes a raw key file readable only by its owner.
    Refuses to replace an existing file unless overwrite is set.
    """
    key_path = Path(key_path)
    check_key(key)
    flags = os.O_WRONLY | os.O_CREAT | (os.O_TRUNC if overwrite else os.O_EXCL)
    fd = os.open(key_path, flags, 0o600)
    with os.fdopen(fd, "wb") as f:
        f.write(key)
    return key_path
