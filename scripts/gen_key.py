"""Create a random 32-byte AES-256 key file."""

import sys

from cypheraes.cli import keygen_main

if __name__ == "__main__":
    sys.exit(keygen_main())
