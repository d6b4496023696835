import argparse
import logging
import sys

from pathlib import Path

from cryptotool.crypto.aead import asymmetric_decrypt, asymmetric_encrypt, symmetric_decrypt, symmetric_encrypt
from cryptotool.crypto.hash import derive_key
from cryptotool.crypto.keys import generate_keypair, prompt_and_derive_key, read_key
from cryptotool.storage.files import load_key, save_key, write_atomic
from cryptotool.utils.dataModels import KeyPair, PRIVATE_KEY_SUFFIX, PUBLIC_KEY_SUFFIX
from cryptotool.utils.helper import STDIN_PATH, read_input, sealed_path, write_stdout

logger = logging.getLogger(__name__)


def _notice(msg: str) -> None:
    print(msg, file=sys.stderr)


def passphrase_key(args: argparse.Namespace, confirm: bool) -> bytes:
    if args.passphrase:
        return derive_key(args.passphrase)
    if confirm:
        return prompt_and_derive_key(on_mismatch=_notice)
    return read_key()


def output_path(args: argparse.Namespace, default: Path | None = None) -> Path | None:
    """``-o`` wins, then ``default``; ``None`` means stdout."""
    if args.out:
        return Path(args.out)
    return default


def check_output(out: Path | None, force: bool) -> None:
    if out is not None and out.exists() and not force:
        print(f"[!] {out} exists. Use --force to overwrite.", file=sys.stderr)
        sys.exit(1)


def emit(data: bytes, out: Path | None) -> None:
    if out is None:
        write_stdout(data)
        return
    write_atomic(out, data)
    logger.debug("wrote %d bytes to %s", len(data), out)


def _sealed_default(args: argparse.Namespace) -> Path | None:
    return None if args.path == STDIN_PATH else sealed_path(Path(args.path), args.suffix)


def cmd_encrypt(args: argparse.Namespace) -> None:
    out = output_path(args, _sealed_default(args))
    check_output(out, args.force)

    data = read_input(args.path)
    logger.debug("read %d bytes from %s", len(data), args.path)
    key = passphrase_key(args, confirm=True)

    enc = symmetric_encrypt(data, key)

    emit(enc, out)
    if out is not None:
        print(f"[+] created encrypted file: {out}")


def cmd_decrypt(args: argparse.Namespace) -> None:
    out = output_path(args)
    check_output(out, args.force)

    data = read_input(args.path)
    logger.debug("read %d bytes from %s", len(data), args.path)
    key = passphrase_key(args, confirm=False)

    dec = symmetric_decrypt(data, key)

    emit(dec, out)
    if out is not None:
        print(f"[+] decrypted {args.path} -> {out}")


def cmd_keygen(args: argparse.Namespace) -> None:
    base = Path(args.name)
    pub_path = base.with_name(base.name + PUBLIC_KEY_SUFFIX)
    priv_path = base.with_name(base.name + PRIVATE_KEY_SUFFIX)
    for p in (pub_path, priv_path):
        check_output(p, args.force)

    pair = KeyPair(*generate_keypair())
    save_key(pub_path, pair.public_key)
    save_key(priv_path, pair.private_key, private=True)

    print(pair.to_dict()["public"])
    print(f"[+] Wrote {pub_path} and {priv_path}", file=sys.stderr)


def cmd_seal(args: argparse.Namespace) -> None:
    out = output_path(args, _sealed_default(args))
    check_output(out, args.force)

    data = read_input(args.path)
    recipient_pub = load_key(Path(args.to))
    sender_priv = load_key(Path(args.key))

    enc = asymmetric_encrypt(data, recipient_pub, sender_priv)

    emit(enc, out)
    if out is not None:
        print(f"[+] sealed {args.path} for {args.to} -> {out}")


def cmd_open(args: argparse.Namespace) -> None:
    out = output_path(args)
    check_output(out, args.force)

    data = read_input(args.path)
    sender_pub = load_key(Path(args.sender))
    recipient_priv = load_key(Path(args.key))

    dec = asymmetric_decrypt(data, sender_pub, recipient_priv)

    emit(dec, out)
    if out is not None:
        print(f"[+] opened {args.path} -> {out}")
