import stat

import pytest

from cypheraes.common.errors import KeyLengthError
from cypheraes.crypto.keys import KEY_SIZE, check_key, generate_key, load_key, save_key


def test_check_key_accepts_32_bytes():
    assert check_key(bytearray(32)) == bytes(32)


@pytest.mark.parametrize("size", [0, 16, 31, 33, 64])
def test_check_key_rejects_other_sizes(size):
    with pytest.raises(KeyLengthError):
        check_key(b"\x00" * size)


def test_load_key(keyfile):
    assert load_key(keyfile) == bytes(range(32))


def test_load_key_wrong_length(tmp_path):
    path = tmp_path / "short.key"
    path.write_bytes(b"too short\n")
    with pytest.raises(KeyLengthError):
        load_key(path)


def test_generate_key_is_random():
    a, b = generate_key(), generate_key()
    assert len(a) == KEY_SIZE
    assert a != b


def test_save_key_round_trip_and_permissions(tmp_path):
    path = save_key(tmp_path / "k.bin", b"\x07" * 32)
    assert load_key(path) == b"\x07" * 32
    assert stat.S_IMODE(path.stat().st_mode) & 0o077 == 0


def test_save_key_refuses_overwrite(tmp_path):
    path = save_key(tmp_path / "k.bin", b"\x07" * 32)
    with pytest.raises(FileExistsError):
        save_key(path, b"\x08" * 32)
    save_key(path, b"\x08" * 32, overwrite=True)
    assert load_key(path) == b"\x08" * 32
