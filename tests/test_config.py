import os

import pytest
from pydantic import ValidationError

from cypheraes.common.config import load_settings


def test_defaults(clean_env, tmp_path):
    settings = load_settings(tmp_path / "missing.env")
    assert settings.keyfile is None
    assert settings.format == "ecb"
    assert settings.verify_padding is True
    assert settings.verbose is False


def test_env_overrides(clean_env, tmp_path):
    clean_env.setenv("CYPHERAES_FORMAT", "CBC")
    clean_env.setenv("CYPHERAES_VERIFY_PADDING", "0")
    clean_env.setenv("CYPHERAES_VERBOSE", "true")
    settings = load_settings(tmp_path / "missing.env")
    assert settings.format == "cbc"
    assert settings.verify_padding is False
    assert settings.verbose is True


def test_dotenv_file(clean_env, tmp_path):
    env = tmp_path / ".env"
    env.write_text("CYPHERAES_KEYFILE=/keys/a.key\n")
    try:
        settings = load_settings(env)
    finally:
        os.environ.pop("CYPHERAES_KEYFILE", None)
    assert settings.keyfile == "/keys/a.key"


def test_invalid_format(clean_env, tmp_path):
    clean_env.setenv("CYPHERAES_FORMAT", "ofb")
    with pytest.raises(ValidationError):
        load_settings(tmp_path / "missing.env")


def test_dotenv_found_from_working_directory(clean_env, tmp_path):
    (tmp_path / ".env").write_text("CYPHERAES_FORMAT=cbc\n")
    clean_env.chdir(tmp_path)
    try:
        settings = load_settings()
    finally:
        os.environ.pop("CYPHERAES_FORMAT", None)
    assert settings.format == "cbc"
