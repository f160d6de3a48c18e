import pytest

from cypheraes.common.utils import hex_preview, sha256_hex, show_bytes
from cypheraes.common.errors import DecodeOutputNotRepresentable
from cypheraes.storage.files import StorageError, output_path, read_input, write_output


@pytest.mark.parametrize("mode,fmt,name", [
    ("encrypt", "ecb", "notes.txt.aes"),
    ("encrypt", "cbc", "notes.txt.aesc"),
    ("decrypt", "ecb", "notes.txt.dec"),
])
def test_output_path(tmp_path, mode, fmt, name):
    assert output_path(tmp_path / "notes.txt", mode, fmt) == tmp_path / name


def test_read_write(tmp_path):
    path = write_output(tmp_path / "out.bin", b"\x00\xffdata")
    assert read_input(path) == b"\x00\xffdata"


def test_read_missing(tmp_path):
    with pytest.raises(StorageError):
        read_input(tmp_path / "nope")


def test_write_into_missing_dir(tmp_path):
    with pytest.raises(StorageError):
        write_output(tmp_path / "no" / "such" / "dir", b"x")


def test_show_bytes():
    assert show_bytes(b"hi", "hex") == "6869"
    assert show_bytes("héllo".encode(), "text") == "héllo"
    assert show_bytes(b"a\xffb", "lossy") == "a\ufffdb"
    with pytest.raises(DecodeOutputNotRepresentable):
        show_bytes(b"a\xffb", "text")
    with pytest.raises(ValueError):
        show_bytes(b"", "base64")


def test_hex_preview_truncates():
    assert hex_preview(b"\x01\x02") == "0102"
    assert hex_preview(b"\x00" * 100, limit=2) == "0000... (100 bytes)"
    assert hex_preview(b"\x00" * 100, limit=None) == "00" * 100


def test_sha256_hex():
    assert sha256_hex(b"") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
