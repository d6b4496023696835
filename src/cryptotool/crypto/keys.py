"""
Nonce, key and key pair generation, plus passphrase prompts.

Every random byte comes from ``random_bytes`` so a failing OS source surfaces
as ``EntropyError`` instead of a short or partially filled value.
"""
import base64
import getpass
import os

from typing import Callable, Optional, Tuple

from nacl.public import PrivateKey

from cryptotool.crypto.errors import EntropyError, PassphraseError
from cryptotool.crypto.hash import derive_key
from cryptotool.utils.dataModels import KEY_SIZE, NONCE_SIZE, PROMPT_ENTER, PROMPT_REPEAT, MISMATCH_NOTICE

Prompt = Callable[[str], str]


def random_bytes(n: int) -> bytes:
    try:
        data = os.urandom(n)
    except (OSError, NotImplementedError) as e:
        raise EntropyError(f"random source unavailable: {e}") from e
    if len(data) != n:
        raise EntropyError(f"random source returned {len(data)} of {n} bytes")
    return data


def generate_nonce() -> bytes:
    return random_bytes(NONCE_SIZE)


def generate_key() -> bytes:
    return random_bytes(KEY_SIZE)


def random_string() -> str:
    """32 random bytes as URL-safe base64 (44 characters, padded)."""
    return base64.urlsafe_b64encode(random_bytes(KEY_SIZE)).decode("ascii")


def generate_keypair() -> Tuple[bytes, bytes]:
    """Return (public_key, private_key), 32 raw bytes each."""
    sk = PrivateKey(random_bytes(PrivateKey.SIZE))
    return bytes(sk.public_key), bytes(sk)


def _ask(prompt: Optional[Prompt], text: str) -> str:
    prompt = prompt or getpass.getpass
    try:
        return prompt(text)
    except EOFError as e:
        raise PassphraseError("no passphrase entered") from e


def prompt_and_derive_key(
    prompt: Optional[Prompt] = None,
    attempts: Optional[int] = None,
    on_mismatch: Optional[Callable[[str], None]] = None,
) -> bytes:
    """Ask for a passphrase twice and derive the key once both entries match.

    ``attempts=None`` repeats until the entries match. With a number, the
    loop gives up with ``PassphraseError`` after that many mismatches.
    """
    tries = 0
    while attempts is None or tries < attempts:
        password = _ask(prompt, PROMPT_ENTER)
        repeat = _ask(prompt, PROMPT_REPEAT)
        if password == repeat:
            return derive_key(password)
        tries += 1
        if on_mismatch is not None:
            on_mismatch(MISMATCH_NOTICE)
    raise PassphraseError(f"passwords did not match after {attempts} attempts")


def read_key(prompt: Optional[Prompt] = None) -> bytes:
    return derive_key(_ask(prompt, PROMPT_ENTER))
