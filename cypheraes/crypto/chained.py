"""
Versioned AES-256-CBC file format (v2).

Layout: MAGIC (4) || VERSION (1) || IV (16) || CBC ciphertext (16*n)

This format is NOT compatible with the headerless ECB output of
cypheraes.crypto.aes and is written under its own file extension. Its total
length is always 5 mod 16, so it can never be mistaken for an ECB file.
"""

import os

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from cypheraes.common.errors import AlignmentViolation, FormatError
from cypheraes.common.protocol import Result
from cypheraes.crypto.keys import check_key
from cypheraes.crypto.padding import BLOCK_SIZE, pad, unpad

MAGIC = b"CAES"
VERSION = 2
HEADER = MAGIC + bytes([VERSION])
IV_SIZE = BLOCK_SIZE


def is_chained(blob: bytes) -> bool:
    """True if blob starts with the v2 header and has the v2 length shape."""
    return blob.startswith(MAGIC) and len(blob) % BLOCK_SIZE == len(HEADER)


def encrypt(key: bytes, plaintext: bytes, iv: bytes = None) -> bytes:
    """
    Encrypts plaintext with AES-256-CBC and a random IV.
    Returns: HEADER || iv || ciphertext
    """
    key = check_key(key)
    if iv is None:
        iv = os.urandom(IV_SIZE)
    elif len(iv) != IV_SIZE:
        raise ValueError(f"IV must be {IV_SIZE} bytes")

    cipher = Cipher(algorithms.AES(key), modes.CBC(iv), backend=default_backend())
    encryptor = cipher.encryptor()
    ct = encryptor.update(pad(plaintext)) + encryptor.finalize()
    return HEADER + iv + ct


def try_decrypt(key: bytes, blob: bytes, verify: bool = True) -> Result:
    """Decrypts a v2 blob; bad padding comes back as Err."""
    key = check_key(key)
    if not blob.startswith(MAGIC):
        raise FormatError("Missing chained-format header")
    if len(blob) < len(HEADER) or blob[len(MAGIC)] != VERSION:
        raise FormatError(f"Unsupported chained-format version (expected {VERSION})")

    body = blob[len(HEADER):]
    if len(body) < IV_SIZE + BLOCK_SIZE:
        raise FormatError("Chained ciphertext too short")
    iv, ct = body[:IV_SIZE], body[IV_SIZE:]
    if len(ct) % BLOCK_SIZE != 0:
        raise AlignmentViolation(
            f"Ciphertext length {len(ct)} is not a multiple of {BLOCK_SIZE} bytes"
        )

    cipher = Cipher(algorithms.AES(key), modes.CBC(iv), backend=default_backend())
    decryptor = cipher.decryptor()
    padded = decryptor.update(ct) + decryptor.finalize()
    return unpad(padded, verify=verify)


def decrypt(key: bytes, blob: bytes, verify: bool = True) -> bytes:
    """Decrypts a v2 blob. Raises PaddingAmbiguity on a bad key or corrupt data."""
    return try_decrypt(key, blob, verify=verify).unwrap()
