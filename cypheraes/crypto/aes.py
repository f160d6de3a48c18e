"""AES-256(ECB)+PKCS#7 helpers (use library)."""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from cypheraes.common.errors import AlignmentViolation
from cypheraes.common.protocol import Direction, Result
from cypheraes.crypto.keys import check_key
from cypheraes.crypto.padding import BLOCK_SIZE, pad, strip, unpad


def iter_blocks(data: bytes):
    """Yields consecutive BLOCK_SIZE slices of data, in order."""
    for offset in range(0, len(data), BLOCK_SIZE):
        yield data[offset:offset + BLOCK_SIZE]


def process(data: bytes, key: bytes, direction: Direction) -> bytes:
    """
    Applies the AES-256 block transform to every 16-byte block of data.

    Blocks are transformed independently (no IV, no chaining), so identical
    plaintext blocks under one key give identical ciphertext blocks.

    data: block-aligned buffer
    key: 32-byte AES key
    direction: Direction.ENCRYPT or Direction.DECRYPT
    Returns: buffer of the same length as data
    """
    direction = Direction(direction)
    key = check_key(key)
    if len(data) % BLOCK_SIZE != 0:
        raise AlignmentViolation(
            f"Input length {len(data)} is not a multiple of {BLOCK_SIZE} bytes"
        )

    cipher = Cipher(
        algorithms.AES(key),
        modes.ECB(),
        backend=default_backend()
    )
    if direction is Direction.ENCRYPT:
        transform = cipher.encryptor()
    else:
        transform = cipher.decryptor()

    out = bytearray()
    for block in iter_blocks(data):
        out += transform.update(block)
    out += transform.finalize()
    return bytes(out)


def encrypt(key: bytes, plaintext: bytes) -> bytes:
    """
    Encrypts plaintext using AES-256 in ECB mode with PKCS#7 padding.

    key: 32-byte AES key
    plaintext: The data to encrypt (may be empty)
    Returns: The ciphertext, 16 to 16+len(plaintext) bytes long
    """
    return process(pad(plaintext), key, Direction.ENCRYPT)


def try_decrypt(key: bytes, ciphertext: bytes, verify: bool = True) -> Result:
    """
    Decrypts and unpads, reporting bad padding as Err instead of raising.

    Key and alignment errors are hard failures and still raise.
    """
    padded = process(ciphertext, key, Direction.DECRYPT)
    return unpad(padded, verify=verify)


def decrypt(key: bytes, ciphertext: bytes, verify: bool = True) -> bytes:
    """
    Decrypts ciphertext using AES-256 in ECB mode with PKCS#7 padding.

    key: 32-byte AES key
    ciphertext: The data to decrypt
    Returns: The original plaintext bytes
    Raises PaddingAmbiguity if the key is wrong or the data is corrupted.
    """
    return try_decrypt(key, ciphertext, verify=verify).unwrap()


def decrypt_lenient(key: bytes, ciphertext: bytes) -> bytes:
    """Legacy decrypt: an invalid padding tail is left in place."""
    return strip(process(ciphertext, key, Direction.DECRYPT))
