import sys

from pathlib import Path

from cryptotool.utils.dataModels import SEALED_SUFFIX

STDIN_PATH = "-"


def sealed_path(path: Path, suffix: str = SEALED_SUFFIX) -> Path:
    return path.with_name(path.name + suffix)


def read_input(path: str) -> bytes:
    """Read a whole file, or stdin when ``path`` is ``-``."""
    if path == STDIN_PATH:
        return sys.stdin.buffer.read()
    src = Path(path)
    if src.is_dir():
        raise IsADirectoryError(f"{src} is a directory")
    return src.read_bytes()


def read_stdin_line() -> bytes:
    data = sys.stdin.buffer.read()
    if data.endswith(b"\n"):
        data = data[:-1]
    return data


def write_stdout(data: bytes) -> None:
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()
