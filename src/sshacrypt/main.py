# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
sshacrypt - Command Line Interface

Creates and checks salted SHA-1 password records and {SSHA} strings, and
hashes files with the built-in SHA-1 engine.
"""

import argparse
import getpass
import logging
import sys
from pathlib import Path
from typing import BinaryIO, Callable, List, Optional, TextIO

from .config import settings
from .crypt import check_crypt, make_crypt
from .passwd import PasswordRecord, check_password, gensalt, make_password
from .salt import RandomSource, source_from_settings
from .selftest import print_test_vectors, validate_implementation
from .hashing import SHA1, HashInputError

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]


def prompt_password_record(
    source: RandomSource,
    prompt: Prompt = getpass.getpass,
    err: Optional[TextIO] = None
) -> PasswordRecord:
    """
    Ask for a password twice until both entries match.

    A fresh salt is generated for every attempt.

    Raises:
        EOFError: If input ends before a match
    """
    err = err or sys.stderr
    while True:
        salt = gensalt(source)
        first = make_password(salt, prompt("Password: "))
        second = make_password(salt, prompt("Again: "))
        if check_password(first, second):
            return first
        print("Bad match, try again.", file=err)


def prompt_new_password(prompt: Prompt = getpass.getpass, err: Optional[TextIO] = None) -> str:
    """Ask for a password twice and return it once both entries match."""
    err = err or sys.stderr
    while True:
        first = prompt("Password: ")
        if first == prompt("Again: "):
            return first
        print("Bad match, try again.", file=err)


def digest_stream(stream: BinaryIO, chunk_size: int) -> str:
    """Hash a binary stream chunk by chunk and return the hex digest."""
    ctx = SHA1()
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        ctx.update(chunk)
    return ctx.hexfinal()


def cmd_mkpass(source: RandomSource, prompt: Prompt, out: TextIO, err: TextIO) -> int:
    record = prompt_password_record(source, prompt, err)
    print(record.to_hex(), file=out)
    return 0


def cmd_crypt(
    source: RandomSource,
    salt_length: Optional[int],
    prompt: Prompt,
    out: TextIO,
    err: TextIO
) -> int:
    crypttext = make_crypt(
        prompt_new_password(prompt, err), salt_length=salt_length, source=source
    )
    if crypttext is None:
        print("Error: could not create password hash", file=err)
        return 1
    print(crypttext, file=out)
    return 0


def cmd_check(crypttext: str, prompt: Prompt, out: TextIO) -> int:
    if check_crypt(crypttext, prompt("Password: ")):
        print("OK", file=out)
        return 0
    print("FAILED", file=out)
    return 1


def cmd_digest(files: List[Path], chunk_size: int, out: TextIO, err: TextIO) -> int:
    if not files:
        print(f"{digest_stream(sys.stdin.buffer, chunk_size)}  -", file=out)
        return 0

    status = 0
    for path in files:
        try:
            with open(path, 'rb') as f:
                print(f"{digest_stream(f, chunk_size)}  {path}", file=out)
        except OSError as e:
            print(f"{path}: {e.strerror}", file=err)
            status = 1
    return status


def cmd_selftest() -> int:
    print_test_vectors()
    return 0 if validate_implementation() else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sshacrypt',
        description='Salted SHA-1 password hashing',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create a raw password record (salt and digest in hex)
  python -m sshacrypt mkpass

  # Create an {SSHA} string with a 12-byte salt
  python -m sshacrypt crypt --salt-length 12

  # Check a password against a stored string
  python -m sshacrypt check '{SSHA}2gDsLm/57U00KyShbiYsgvPIsQtzYWx0'

  # Hash files
  python -m sshacrypt digest README.md setup.cfg

  # Run known-answer tests
  python -m sshacrypt selftest
        """
    )

    parser.add_argument(
        'command',
        choices=['mkpass', 'crypt', 'check', 'digest', 'selftest'],
        help='Command to execute'
    )

    parser.add_argument(
        'args',
        nargs='*',
        help='{SSHA} string for check, files for digest'
    )

    parser.add_argument(
        '--salt-length',
        type=int,
        help=f'Salt length in bytes for crypt (default: {settings.salt_length})'
    )

    return parser


def main(
    argv: Optional[List[str]] = None,
    prompt: Prompt = getpass.getpass,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None
) -> int:
    """Main entry point."""
    out = out or sys.stdout
    err = err or sys.stderr

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    parser = build_parser()
    args = parser.parse_args(argv)
    source = source_from_settings(settings)
    logger.debug(f"Running {args.command} with {settings.salt_source} salt source")

    try:
        if args.command == 'mkpass':
            return cmd_mkpass(source, prompt, out, err)

        elif args.command == 'crypt':
            return cmd_crypt(source, args.salt_length, prompt, out, err)

        elif args.command == 'check':
            if len(args.args) != 1:
                print("Error: check needs exactly one {SSHA} string", file=err)
                return 2
            return cmd_check(args.args[0], prompt, out)

        elif args.command == 'digest':
            return cmd_digest([Path(p) for p in args.args], settings.read_chunk_size, out, err)

        elif args.command == 'selftest':
            return cmd_selftest()

    except EOFError:
        print(file=err)
        return 1

    except HashInputError as e:
        print(f"Error: {e}", file=err)
        return 1

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=err)
        return 1

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
