#!/usr/bin/env python3
"""
cryptotool: digests, authenticated encryption and small encoding helpers.

Sealed file format (raw binary, no header):
    nonce     : 24 bytes
    ciphertext: len(plaintext) + 16 bytes (XSalsa20-Poly1305, tag included)

Commands:
  md5|sha1|sha256|sha512   Digest of -f FILE, -d DIR, -s STRING or stdin
  base64                   Base64 encode (or --decode) -f FILE, -s STRING or stdin
  convert <value>          Integer in bin/oct/dec/hex
  encrypt <path>           Passphrase encryption -> <path>.enc
  decrypt <path>           Passphrase decryption -> stdout
  keygen <name>            X25519 key pair -> <name>.pub, <name>.key
  seal <path>              Public-key encryption (--to PUB --key KEY) -> <path>.enc
  open <path>              Public-key decryption (--from PUB --key KEY) -> stdout

Security choices:
  - secretbox/box from libsodium via PyNaCl, fresh random nonce per message
  - passphrase key = SHA-256(passphrase), unsalted; not brute-force resistant
"""
from __future__ import annotations

import logging
import sys

from cryptotool.crypto.errors import CryptoToolError
from cryptotool.ui.cli import build_parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        args.func(args)
    except (CryptoToolError, ValueError, OSError) as e:
        print(f"[!] {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
