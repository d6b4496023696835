import argparse
import logging
import sys

from pathlib import Path

from cryptotool.crypto.hash import digest, hash_dir, hash_file
from cryptotool.utils.convert import b64decode, b64encode, convert_int
from cryptotool.utils.helper import read_input, read_stdin_line, write_stdout, STDIN_PATH

logger = logging.getLogger(__name__)


def cmd_hash(args: argparse.Namespace) -> None:
    name = args.algorithm
    if args.file:
        print(hash_file(Path(args.file), name))
    elif args.string is not None:
        print(digest(name, args.string.encode("utf-8")).hex())
    elif args.dir:
        logger.debug("hashing directory %s with %s", args.dir, name)
        print(hash_dir(Path(args.dir), name))
    else:
        print(digest(name, read_stdin_line()).hex())


def cmd_base64(args: argparse.Namespace) -> None:
    if args.file:
        data = read_input(args.file)
    elif args.string is not None:
        data = args.string.encode("utf-8")
    else:
        data = read_input(STDIN_PATH)

    if args.decode:
        write_stdout(b64decode(data))
    else:
        print(b64encode(data))


def cmd_convert(args: argparse.Namespace) -> None:
    b, o, d, h = convert_int(args.value)
    print("BIN:", b)
    print("OCT:", o)
    print("DEC:", d)
    print("HEX:", h)
