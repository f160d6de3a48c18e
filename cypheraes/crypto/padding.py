"""PKCS#7 padding codec for 16-byte AES blocks (use library)."""

from cryptography.hazmat.primitives import padding

from cypheraes.common.errors import PaddingAmbiguity
from cypheraes.common.protocol import Err, Ok, Result

# AES block size is 128 bits (16 bytes)
BLOCK_SIZE = 16
AES_BLOCK_SIZE_BITS = BLOCK_SIZE * 8


def pad(plaintext: bytes) -> bytes:
    """
    Appends PKCS#7 padding so the result is a multiple of BLOCK_SIZE.

    Always adds between 1 and 16 bytes: input that is already block-aligned
    gains a full block of value 16.
    """
    padder = padding.PKCS7(AES_BLOCK_SIZE_BITS).padder()
    return padder.update(plaintext) + padder.finalize()


def unpad(padded: bytes, verify: bool = True) -> Result:
    """
    Removes PKCS#7 padding.

    padded: decrypted, still-padded buffer
    verify: also require every pad byte to equal the pad length
    Returns: Ok(plaintext), or Err(kind="padding_ambiguity") carrying the
             untouched buffer when the tail is not valid padding.
    """
    if not padded:
        return Ok(data=padded)

    if verify:
        unpadder = padding.PKCS7(AES_BLOCK_SIZE_BITS).unpadder()
        try:
            plaintext = unpadder.update(padded) + unpadder.finalize()
        except ValueError as e:
            return _ambiguous(padded, str(e).rstrip("."))
        return Ok(data=plaintext)

    # The library has no permissive mode: only the last byte is checked here
    pad_len = padded[-1]
    if pad_len < 1 or pad_len > BLOCK_SIZE:
        return _ambiguous(padded, f"Invalid padding length byte {pad_len}")
    if pad_len > len(padded):
        return _ambiguous(padded, f"Padding length {pad_len} exceeds buffer")

    return Ok(data=padded[:-pad_len])


def strip(padded: bytes) -> bytes:
    """Legacy decode: strips a tail in range, otherwise returns the buffer unchanged."""
    return unpad(padded, verify=False).unwrap_or(padded)


def _ambiguous(padded: bytes, detail: str) -> Err:
    return Err.from_exception(PaddingAmbiguity(detail), data=padded)
