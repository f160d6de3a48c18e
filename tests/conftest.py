import pytest

ZERO_KEY = bytes(32)
ONE_KEY = b"\x01" * 32


@pytest.fixture
def zero_key():
    return ZERO_KEY


@pytest.fixture
def one_key():
    return ONE_KEY


@pytest.fixture
def clean_env(monkeypatch):
    """Removes CYPHERAES_* variables so tests see the defaults."""
    for name in ("CYPHERAES_KEYFILE", "CYPHERAES_FORMAT",
                 "CYPHERAES_VERIFY_PADDING", "CYPHERAES_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def keyfile(tmp_path):
    path = tmp_path / "key.bin"
    path.write_bytes(bytes(range(32)))
    return path
