"""Settings from environment variables (.env supported)."""

import os
from typing import Literal, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    """
    Defaults for the command-line driver. Flags override these.
    """
    keyfile: Optional[str] = None
    format: Literal["ecb", "cbc"] = "ecb"
    verify_padding: bool = True
    verbose: bool = False

    @field_validator("format", mode="before")
    @classmethod
    def _lower(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Loads CYPHERAES_* variables, reading a .env file first if present.
    The .env file is searched for from the working directory upwards.
    Values already set in the environment win over the .env file.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    raw = {
        "keyfile": os.getenv("CYPHERAES_KEYFILE"),
        "format": os.getenv("CYPHERAES_FORMAT"),
        "verify_padding": os.getenv("CYPHERAES_VERIFY_PADDING"),
        "verbose": os.getenv("CYPHERAES_VERBOSE"),
    }
    # Unset variables fall back to the model defaults
    raw = {k: v for k, v in raw.items() if v not in (None, "")}

    return Settings(**raw)
