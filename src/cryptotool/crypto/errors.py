class CryptoToolError(Exception):
    """Base class for every failure raised by the crypto layer."""


class EntropyError(CryptoToolError):
    """The OS random source could not supply the requested bytes."""


class MalformedInputError(CryptoToolError):
    """A sealed message is too short to hold a nonce and a tag."""


class DecryptionError(CryptoToolError):
    """Authentication failed. Carries no detail on purpose."""

    def __init__(self) -> None:
        super().__init__("error decrypting")


class PassphraseError(CryptoToolError):
    """No confirmed passphrase could be read."""
