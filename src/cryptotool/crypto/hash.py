from pathlib import Path
from typing import Dict, Type

from cryptography.hazmat.primitives import hashes

from cryptotool.utils.dataModels import KEY_SIZE, READ_CHUNK_SIZE

ALGORITHMS: Dict[str, Type[hashes.HashAlgorithm]] = {
    "md5": hashes.MD5,
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha512": hashes.SHA512,
}


def new_hash(name: str) -> hashes.Hash:
    try:
        algorithm = ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {name}") from None
    return hashes.Hash(algorithm())


def digest(name: str, data: bytes) -> bytes:
    h = new_hash(name)
    h.update(data)
    return h.finalize()


def md5_bytes(data: bytes) -> bytes:
    return digest("md5", data)


def sha1_bytes(data: bytes) -> bytes:
    return digest("sha1", data)


def sha256_bytes(data: bytes) -> bytes:
    return digest("sha256", data)


def sha512_bytes(data: bytes) -> bytes:
    return digest("sha512", data)


def _feed_file(h: hashes.Hash, path: Path) -> None:
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(READ_CHUNK_SIZE), b""):
            h.update(chunk)


def hash_file(path: Path, name: str) -> str:
    """Hex digest of a file's content, read in chunks."""
    h = new_hash(name)
    _feed_file(h, Path(path))
    return h.finalize().hex()


def hash_dir(path: Path, name: str) -> str:
    """Hex digest over every regular file below ``path``.

    Files are visited in sorted relative-path order. For each one the digest
    is fed the POSIX relative path, a NUL byte, then the file content, so a
    rename changes the result just like an edit does.
    """
    root = Path(path)
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")
    h = new_hash(name)
    files = sorted((p for p in root.rglob("*") if p.is_file()), key=lambda p: p.relative_to(root).as_posix())
    for p in files:
        h.update(p.relative_to(root).as_posix().encode("utf-8") + b"\x00")
        _feed_file(h, p)
    return h.finalize().hex()


def derive_key(passphrase: str) -> bytes:
    """Key = SHA-256(passphrase)[:32]. Unsalted and fast: a convenience, not a password hash."""
    return sha256_bytes(passphrase.encode("utf-8"))[:KEY_SIZE]
