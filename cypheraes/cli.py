"""cypheraes: AES-256 file encrypt/decrypt command-line tool.

Encrypt: cypheraes -m encrypt -k key.bin -f notes.txt   -> notes.txt.aes
Decrypt: cypheraes -m decrypt -k key.bin -f notes.txt.aes -> notes.txt.aes.dec
"""

import argparse
import sys

from pydantic import ValidationError

from cypheraes.common.config import load_settings
from cypheraes.common.errors import (
    AlignmentViolation,
    DecodeOutputNotRepresentable,
    FormatError,
    KeyLengthError,
    PaddingAmbiguity,
)
from cypheraes.common.utils import hex_preview, sha256_hex, show_bytes
from cypheraes.crypto import aes, chained
from cypheraes.crypto.keys import generate_key, load_key, save_key
from cypheraes.crypto.padding import strip
from cypheraes.storage.files import StorageError, output_path, read_input, write_output

EXIT_OK = 0
EXIT_IO = 1
EXIT_KEY = 2
EXIT_CIPHERTEXT = 3
EXIT_PADDING = 4
EXIT_CONFIG = 5


def err(msg: str):
    print(msg, file=sys.stderr)


def build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cypheraes",
        description="AES-256 Encrypt/Decrypt CLI Tool",
    )
    parser.add_argument("-m", "--mode", required=True, choices=["encrypt", "decrypt"],
                        help="Mode: encrypt or decrypt")
    parser.add_argument("-k", "--keyfile", default=settings.keyfile,
                        required=settings.keyfile is None,
                        help="Path to the 32-byte key file (env: CYPHERAES_KEYFILE)")
    parser.add_argument("-f", "--filepath", required=True,
                        help="File to be encrypted or decrypted")
    parser.add_argument("--format", choices=["ecb", "cbc"], default=settings.format,
                        help="Encrypt format: ecb (headerless, default) or cbc (v2, random IV). "
                             "Decrypt detects the format itself.")
    parser.add_argument("--show", choices=["none", "hex", "text", "lossy"], default="none",
                        help="Print the decrypted bytes as hex, strict UTF-8 text or lossy text")
    parser.add_argument("--no-verify", dest="verify", action="store_false",
                        default=settings.verify_padding,
                        help="Only check the last padding byte, not the whole tail")
    parser.add_argument("--lenient", action="store_true",
                        help="On invalid padding fall back to legacy removal (last byte only, "
                             "buffer unchanged if out of range) instead of failing")
    parser.add_argument("-v", "--verbose", action="store_true", default=settings.verbose,
                        help="Print debug dumps of input and output")
    return parser


def handle_encryption(data: bytes, key: bytes, file_path: str, fmt: str, verbose: bool) -> int:
    if verbose:
        print(f"DEBUG: Original ({len(data)} bytes): {data!r}")

    if fmt == "cbc":
        encrypted = chained.encrypt(key, data)
    else:
        encrypted = aes.encrypt(key, data)

    out_file = write_output(output_path(file_path, "encrypt", fmt), encrypted)

    if verbose:
        print(f"DEBUG: Encrypted (hex): {hex_preview(encrypted, limit=None)}")
    print(f"[+] Encrypted {len(data)} -> {len(encrypted)} bytes: {out_file}")
    return EXIT_OK


def handle_decryption(data: bytes, key: bytes, file_path: str, verify: bool,
                      lenient: bool, show: str, verbose: bool) -> int:
    fmt = "cbc" if chained.is_chained(data) else "ecb"
    if verbose:
        print(f"DEBUG: Detected format: {fmt}")

    module = chained if fmt == "cbc" else aes
    result = module.try_decrypt(key, data, verify=verify)
    if result.ok:
        decrypted = result.data
    elif lenient:
        err(f"[!] Warning: {result.detail}; falling back to legacy padding removal.")
        decrypted = strip(result.data)
    else:
        raise result.to_exception()

    out_file = write_output(output_path(file_path, "decrypt", fmt), decrypted)

    if verbose:
        print(f"DEBUG: Decrypted sha256: {sha256_hex(decrypted)}")
    if show != "none":
        try:
            print(f"\nDecrypted: {show_bytes(decrypted, show)}\n")
        except DecodeOutputNotRepresentable as e:
            # Display only; the file above already holds the exact bytes
            err(f"[!] Warning: {e}")
    print(f"[+] Decrypted {len(data)} -> {len(decrypted)} bytes: {out_file}")
    return EXIT_OK


def main(argv=None) -> int:
    try:
        settings = load_settings()
    except ValidationError as e:
        err(f"[!] Error: invalid CYPHERAES_* environment setting: {e}")
        return EXIT_CONFIG
    args = build_parser(settings).parse_args(argv)

    try:
        key = load_key(args.keyfile)
    except KeyLengthError as e:
        err(f"[!] Error: {e}")
        return EXIT_KEY
    except OSError as e:
        err(f"[!] Error: could not read key file: {e}")
        return EXIT_KEY

    try:
        data = read_input(args.filepath)
        if args.mode == "encrypt":
            return handle_encryption(data, key, args.filepath, args.format, args.verbose)
        return handle_decryption(data, key, args.filepath, args.verify,
                                 args.lenient, args.show, args.verbose)
    except StorageError as e:
        err(f"[!] Error: {e}")
        return EXIT_IO
    except (AlignmentViolation, FormatError) as e:
        err(f"[!] Ciphertext error: {e}")
        return EXIT_CIPHERTEXT
    except PaddingAmbiguity as e:
        err(f"[!] Padding error: {e}. Key may be incorrect or data corrupted.")
        return EXIT_PADDING


def keygen_main(argv=None) -> int:
    """Writes a fresh random 32-byte key file."""
    parser = argparse.ArgumentParser(prog="cypheraes-keygen",
                                     description="Generate a 32-byte AES-256 key file")
    parser.add_argument("--out", required=True, help="Output key file path")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing file")
    args = parser.parse_args(argv)

    try:
        key_path = save_key(args.out, generate_key(), overwrite=args.force)
    except FileExistsError:
        err(f"[!] Error: {args.out} already exists (use --force to replace it)")
        return EXIT_IO
    except OSError as e:
        err(f"[!] Error: could not write key file: {e}")
        return EXIT_IO

    print(f"[+] Key saved: {key_path}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
