import base64
import binascii
import os

from pathlib import Path

from cryptotool.utils.dataModels import KEY_SIZE, PRIVATE_KEY_MODE


def write_atomic(path: Path, data: bytes, mode: int | None = None) -> None:
    """Write to a fresh sibling temp file, then move it over ``path``.

    The temp file is created with ``mode`` already applied, and a leftover
    ``<path>.tmp`` makes the write fail instead of being clobbered.
    """
    tmp = path.with_name(path.name + ".tmp")
    fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666 if mode is None else mode)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, path)
    finally:
        if tmp.exists():
            tmp.unlink()


def save_key(path: Path, key: bytes, private: bool = False) -> None:
    if len(key) != KEY_SIZE:
        raise ValueError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
    line = base64.b64encode(key) + b"\n"
    write_atomic(path, line, PRIVATE_KEY_MODE if private else None)


def load_key(path: Path) -> bytes:
    data = path.read_bytes().strip()
    try:
        key = base64.b64decode(data, validate=True)
    except binascii.Error:
        raise ValueError(f"{path} is not a valid key file") from None
    if len(key) != KEY_SIZE:
        raise ValueError(f"{path} holds a {len(key)}-byte key, expected {KEY_SIZE}")
    return key
