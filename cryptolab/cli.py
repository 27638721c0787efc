"""
Command Line Interface

    cryptolab encrypt --cipher feistel --key 133457799BBCDFF1 HELLO
    cryptolab decrypt --cipher spn --key 2B7E1516... 3AD77BB4...
    cryptolab keygen --cipher spn
    cryptolab info
    cryptolab analyze --cipher feistel

Defaults for --padding, --encoding and --log-level come from the
CRYPTOLAB_* environment variables.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .analysis import avalanche, evaluate_sbox, feistel_sbox_as_table
from .codec.conversions import TextEncoding
from .codec.padding import PaddingPolicy
from .config import load_settings
from .exceptions import CryptolabError
from .registry import all_info, available_ciphers, generate_key, get_engine, get_info
from .tables import SPN_SBOX

logger = logging.getLogger(__name__)

_CIPHER_CHOICES = available_ciphers() + ['des', 'aes']


def _read_input(value: Optional[str]) -> str:
    if value is not None:
        return value
    return sys.stdin.read().rstrip('\r\n')


def _cmd_encrypt(args) -> int:
    engine = get_engine(args.cipher, padding_policy=args.padding,
                        text_encoding=args.encoding)
    print(engine.encrypt(_read_input(args.text), args.key))
    return 0


def _cmd_decrypt(args) -> int:
    engine = get_engine(args.cipher, padding_policy=args.padding,
                        text_encoding=args.encoding)
    print(engine.decrypt(_read_input(args.text).strip(), args.key))
    return 0


def _cmd_keygen(args) -> int:
    print(generate_key(args.cipher))
    return 0


def _cmd_info(args) -> int:
    infos = [get_info(args.cipher)] if args.cipher else list(all_info().values())
    for info in infos:
        print(f"{info.title} [{info.name}]")
        print(f"  {info.formula}")
        print(f"  {info.category} / {info.structure}, security: "
              f"{info.security} ({info.security_level}/5)")
        print(f"  {info.description}")
        print(f"  Key: {info.key_hint}")
    return 0


def _cmd_analyze(args) -> int:
    engine = get_engine(args.cipher)
    cipher = engine.cipher

    if cipher.name == 'feistel':
        for i in range(8):
            metrics = evaluate_sbox(feistel_sbox_as_table(i))
            print(f"S{i + 1}: differential={metrics['differential']} "
                  f"linear={metrics['linear']:.4f}")
    else:
        metrics = evaluate_sbox(SPN_SBOX)
        print(f"S-box: differential={metrics['differential']} "
              f"linear={metrics['linear']:.4f} nonlinearity={metrics['nonlinearity']}")

    key = engine.validate_key(args.key) if args.key else bytes(cipher.key_size)
    block = bytes(range(cipher.block_size))
    print(f"Avalanche: {avalanche(cipher, block, key):.4f}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        prog='cryptolab',
        description='Educational Feistel and SPN block ciphers')
    parser.add_argument('--padding', type=PaddingPolicy,
                        choices=list(PaddingPolicy), default=settings.padding_policy,
                        metavar='{lenient,strict}',
                        help='How malformed padding is handled on decryption')
    parser.add_argument('--encoding', type=TextEncoding,
                        choices=list(TextEncoding), default=settings.text_encoding,
                        metavar='{latin-1,utf-8}',
                        help='How text characters map to bytes')
    parser.add_argument('--log-level', type=str.upper, default=settings.log_level,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Logging level (default: %(default)s)')

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('encrypt', help='Encrypt text to hex')
    p.add_argument('--cipher', choices=_CIPHER_CHOICES, required=True)
    p.add_argument('--key', required=True, help='Hex key')
    p.add_argument('text', nargs='?', help='Plaintext (stdin if omitted)')
    p.set_defaults(func=_cmd_encrypt)

    p = sub.add_parser('decrypt', help='Decrypt hex to text')
    p.add_argument('--cipher', choices=_CIPHER_CHOICES, required=True)
    p.add_argument('--key', required=True, help='Hex key')
    p.add_argument('text', nargs='?', help='Ciphertext hex (stdin if omitted)')
    p.set_defaults(func=_cmd_decrypt)

    p = sub.add_parser('keygen', help='Print a random key')
    p.add_argument('--cipher', choices=_CIPHER_CHOICES, required=True)
    p.set_defaults(func=_cmd_keygen)

    p = sub.add_parser('info', help='Describe the ciphers')
    p.add_argument('--cipher', choices=_CIPHER_CHOICES)
    p.set_defaults(func=_cmd_info)

    p = sub.add_parser('analyze', help='S-box metrics and avalanche')
    p.add_argument('--cipher', choices=_CIPHER_CHOICES, required=True)
    p.add_argument('--key', help='Hex key (all zeros if omitted)')
    p.set_defaults(func=_cmd_analyze)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        parser = build_parser()
    except ValueError as e:
        # Bad CRYPTOLAB_* environment value
        print(f"cryptolab: {e}", file=sys.stderr)
        return 2

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        return args.func(args)
    except CryptolabError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"cryptolab: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
