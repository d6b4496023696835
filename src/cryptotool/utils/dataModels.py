import base64

from dataclasses import dataclass
from typing import Dict

from nacl.bindings import crypto_secretbox_MACBYTES

KEY_SIZE = 32
NONCE_SIZE = 24
TAG_SIZE = crypto_secretbox_MACBYTES  # Poly1305, 16 bytes
MIN_SEALED_SIZE = NONCE_SIZE + TAG_SIZE

READ_CHUNK_SIZE = 64 * 1024

SEALED_SUFFIX = ".enc"
SUFFIX_ENV = "CRYPTOTOOL_SUFFIX"
PUBLIC_KEY_SUFFIX = ".pub"
PRIVATE_KEY_SUFFIX = ".key"
PRIVATE_KEY_MODE = 0o600

PASSPHRASE_ENV = "CRYPTOTOOL_PASSPHRASE"

PROMPT_ENTER = "enter password: "
PROMPT_REPEAT = "repeat password: "
MISMATCH_NOTICE = "passwords don't match! please try again"


@dataclass
class KeyPair:
    public_key: bytes
    private_key: bytes

    def to_dict(self) -> Dict[str, str]:
        return {
            "public": base64.b64encode(self.public_key).decode("ascii"),
            "private": base64.b64encode(self.private_key).decode("ascii"),
        }
