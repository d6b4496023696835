import base64
import binascii

from typing import Tuple


def convert_int(value: str) -> Tuple[str, str, str, str]:
    """Return (bin, oct, dec, hex) renderings of an integer literal.

    Accepts the prefixes ``0b``, ``0o`` and ``0x`` (any case), a leading sign
    and underscores between digits; anything else is read as decimal.
    """
    text = value.strip()
    try:
        n = int(text, 0)
    except ValueError:
        raise ValueError(f"Not an integer: {value!r}") from None
    sign = "-" if n < 0 else ""
    m = abs(n)
    return sign + format(m, "b"), sign + format(m, "o"), str(n), sign + format(m, "x")


def b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64decode(text: bytes) -> bytes:
    try:
        return base64.b64decode(b"".join(text.split()), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 input: {e}") from None
