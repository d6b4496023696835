import argparse
import os

from cryptotool.crypto.hash import ALGORITHMS
from cryptotool.utils.core import cmd_decrypt, cmd_encrypt, cmd_keygen, cmd_open, cmd_seal
from cryptotool.utils.dataModels import PASSPHRASE_ENV, SEALED_SUFFIX, SUFFIX_ENV
from cryptotool.utils.tools import cmd_base64, cmd_convert, cmd_hash


def _add_source(p: argparse.ArgumentParser, with_dir: bool) -> None:
    src = p.add_mutually_exclusive_group()
    src.add_argument("-f", "--file", help="Use file")
    if with_dir:
        src.add_argument("-d", "--dir", help="Use directory")
    src.add_argument("-s", "--string", help="Use string")


def _add_output(p: argparse.ArgumentParser) -> None:
    p.add_argument("-o", "--out", help="Output path (default: see command help)")
    p.add_argument("--force", action="store_true", help="Overwrite the output if present")


def _add_suffix(p: argparse.ArgumentParser) -> None:
    p.add_argument("--suffix", default=os.getenv(SUFFIX_ENV, SEALED_SUFFIX), help=f"Suffix for the default output (default: ${SUFFIX_ENV}, else {SEALED_SUFFIX})")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cryptotool", description="Hashes, authenticated encryption and small encoding helpers")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    for name in ALGORITHMS:
        p_hash = sub.add_parser(name, help=f"Print the {name} digest of a file, directory, string or stdin")
        _add_source(p_hash, with_dir=True)
        p_hash.set_defaults(func=cmd_hash, algorithm=name)

    p_b64 = sub.add_parser("base64", help="Base64 encode a file, string or stdin")
    _add_source(p_b64, with_dir=False)
    p_b64.add_argument("--decode", action="store_true", help="Decode instead of encode")
    p_b64.set_defaults(func=cmd_base64)

    p_conv = sub.add_parser("convert", help="Show an integer in bin, oct, dec and hex")
    p_conv.add_argument("value", help="Integer, optionally prefixed with 0b, 0o or 0x")
    p_conv.set_defaults(func=cmd_convert)

    p_enc = sub.add_parser("encrypt", help="Encrypt a file with a passphrase (default output: PATH.enc)")
    p_enc.add_argument("path", help="File to encrypt, or - for stdin (output to stdout)")
    p_enc.add_argument("--passphrase", default=os.getenv(PASSPHRASE_ENV), help=f"Passphrase (default: ${PASSPHRASE_ENV}, else prompt twice)")
    _add_output(p_enc)
    _add_suffix(p_enc)
    p_enc.set_defaults(func=cmd_encrypt)

    p_dec = sub.add_parser("decrypt", help="Decrypt a file with a passphrase (default output: stdout)")
    p_dec.add_argument("path", help="File to decrypt, or - for stdin")
    p_dec.add_argument("--passphrase", default=os.getenv(PASSPHRASE_ENV), help=f"Passphrase (default: ${PASSPHRASE_ENV}, else prompt)")
    _add_output(p_dec)
    p_dec.set_defaults(func=cmd_decrypt)

    p_key = sub.add_parser("keygen", help="Generate a key pair as NAME.pub and NAME.key")
    p_key.add_argument("name", help="Path prefix for the key files")
    p_key.add_argument("--force", action="store_true", help="Overwrite existing key files")
    p_key.set_defaults(func=cmd_keygen)

    p_seal = sub.add_parser("seal", help="Encrypt a file for a recipient's public key (default output: PATH.enc)")
    p_seal.add_argument("path", help="File to seal, or - for stdin")
    p_seal.add_argument("--to", required=True, help="Recipient public key file")
    p_seal.add_argument("--key", required=True, help="Sender private key file")
    _add_output(p_seal)
    _add_suffix(p_seal)
    p_seal.set_defaults(func=cmd_seal)

    p_open = sub.add_parser("open", help="Decrypt a sealed file (default output: stdout)")
    p_open.add_argument("path", help="File to open, or - for stdin")
    p_open.add_argument("--from", dest="sender", required=True, help="Sender public key file")
    p_open.add_argument("--key", required=True, help="Recipient private key file")
    _add_output(p_open)
    p_open.set_defaults(func=cmd_open)

    return p
