"""Error kinds raised by the cipher core and the command-line driver."""


class CipherError(Exception):
    """Base class for every cypheraes failure."""
    pass


class KeyLengthError(CipherError):
    """Key is not exactly 32 bytes."""
    pass


class AlignmentViolation(CipherError):
    """Input to the block driver is not a multiple of the block size."""
    pass


class PaddingAmbiguity(CipherError):
    """
    Trailing bytes do not form a valid PKCS#7 tail.
    Usually means a wrong key or corrupted/foreign ciphertext.
    """
    pass


class FormatError(CipherError):
    """Chained-format header is missing or carries an unknown version."""
    pass


class DecodeOutputNotRepresentable(CipherError):
    """Decrypted bytes could not be shown as strict UTF-8 text."""
    pass
