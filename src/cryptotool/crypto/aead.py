"""
Sealing and opening with NaCl secretbox and box.

Every sealed message is ``nonce(24) || ciphertext``, where the ciphertext
carries the 16-byte Poly1305 tag. Secretbox uses XSalsa20-Poly1305 under a
32-byte shared key; box derives that key from Curve25519 of one side's
private key and the other side's public key.
"""
from nacl.exceptions import CryptoError
from nacl.public import Box, PrivateKey, PublicKey
from nacl.secret import SecretBox

from cryptotool.crypto.errors import DecryptionError, MalformedInputError
from cryptotool.crypto.keys import generate_nonce
from cryptotool.utils.dataModels import MIN_SEALED_SIZE, NONCE_SIZE


def _split(data: bytes) -> tuple[bytes, bytes]:
    if len(data) < MIN_SEALED_SIZE:
        raise MalformedInputError(f"sealed message too short: {len(data)} < {MIN_SEALED_SIZE} bytes")
    return data[:NONCE_SIZE], data[NONCE_SIZE:]


def symmetric_encrypt(data: bytes, key: bytes) -> bytes:
    nonce = generate_nonce()
    return bytes(SecretBox(key).encrypt(data, nonce))


def symmetric_encrypt_static(data: bytes, static_nonce: bytes, key: bytes) -> bytes:
    """Seal with a caller-chosen nonce. Deterministic output, for tests only.

    Reusing ``static_nonce`` with the same key for two messages breaks both.
    """
    if len(static_nonce) != NONCE_SIZE:
        raise ValueError(f"nonce must be {NONCE_SIZE} bytes, got {len(static_nonce)}")
    return bytes(SecretBox(key).encrypt(data, static_nonce))


def symmetric_decrypt(data: bytes, key: bytes) -> bytes:
    nonce, ct = _split(data)
    box = SecretBox(key)
    try:
        return box.decrypt(ct, nonce)
    except CryptoError:
        raise DecryptionError() from None


def asymmetric_encrypt(data: bytes, public_key: bytes, private_key: bytes) -> bytes:
    """Seal for the holder of ``public_key`` (recipient), from ``private_key`` (sender)."""
    nonce = generate_nonce()
    box = Box(PrivateKey(private_key), PublicKey(public_key))
    return bytes(box.encrypt(data, nonce))


def asymmetric_decrypt(data: bytes, public_key: bytes, private_key: bytes) -> bytes:
    """Open with the sender's ``public_key`` and the recipient's ``private_key``."""
    nonce, ct = _split(data)
    box = Box(PrivateKey(private_key), PublicKey(public_key))
    try:
        return box.decrypt(ct, nonce)
    except CryptoError:
        raise DecryptionError() from None
