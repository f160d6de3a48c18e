"""Input/output files for the command-line driver."""

from pathlib import Path

# Output extensions per (mode, format). ECB and CBC never share one.
EXTENSIONS = {
    ("encrypt", "ecb"): ".aes",
    ("encrypt", "cbc"): ".aesc",
    ("decrypt", "ecb"): ".dec",
    ("decrypt", "cbc"): ".dec",
}


class StorageError(Exception):
    """Reading or writing a file failed."""
    pass


def output_path(input_path, mode: str, fmt: str = "ecb") -> Path:
    """Sibling path: the input name plus the extension for mode/format."""
    input_path = Path(input_path)
    return input_path.with_name(input_path.name + EXTENSIONS[(mode, fmt)])


def read_input(path) -> bytes:
    """Reads the whole file as raw bytes."""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise StorageError(f"Could not read {path}: {e}") from e


def write_output(path, data: bytes) -> Path:
    """Writes data verbatim, replacing any existing file."""
    path = Path(path)
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise StorageError(f"Could not write {path}: {e}") from e
    return path
