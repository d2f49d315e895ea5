"""
PeerShare - Command line entry point.

Created by orpheus497
"""

import argparse
import base64
import binascii
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from . import __version__, crypto, invite, qr_code
from .config import Config
from .errors import EntropyError, PeerShareError
from .logging_setup import setup_logging

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_ENTROPY = 3


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="peershare",
        description="PeerShare - authenticated encryption for peer-to-peer sharing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  peershare keygen                                  # New random key
  peershare encrypt --key KEY --text "hello"        # Encrypt a message
  peershare decrypt --key KEY --envelope ENVELOPE   # Decrypt a message
  peershare encrypt --key KEY --in a.pdf --out a.pdf.enc
  peershare invite --qr                             # Invite code with QR

Created by orpheus497
        """,
    )

    parser.add_argument("--version", action="version", version=f"PeerShare {__version__}")
    parser.add_argument("--config", type=str, default=None, help="Path to config.toml")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    keygen = sub.add_parser("keygen", help="Generate a new key")
    keygen.add_argument("--password", type=str, help="Derive the key from a shared password")
    keygen.add_argument("--salt", type=str, help="Base64 salt to use with --password")

    encrypt = sub.add_parser("encrypt", help="Encrypt a message or file")
    encrypt.add_argument("--key", required=True, help="Base64 key")
    source = encrypt.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Text message to encrypt")
    source.add_argument("--in", dest="infile", help="File to encrypt")
    encrypt.add_argument("--out", dest="outfile", help="Output file (with --in)")

    decrypt = sub.add_parser("decrypt", help="Decrypt a message or file")
    decrypt.add_argument("--key", required=True, help="Base64 key")
    source = decrypt.add_mutually_exclusive_group(required=True)
    source.add_argument("--envelope", help="Base64 envelope to decrypt")
    source.add_argument("--in", dest="infile", help="Encrypted file")
    decrypt.add_argument("--out", dest="outfile", help="Output file (with --in)")

    inv = sub.add_parser("invite", help="Generate an invite code")
    inv.add_argument("--qr", action="store_true", help="Also show the code as a QR code")

    sub.add_parser("password", help="Generate a random transfer password")

    qr = sub.add_parser("qr", help="Render a string as a QR code")
    qr.add_argument("data", help="String to encode")
    qr_out = qr.add_mutually_exclusive_group()
    qr_out.add_argument("--png", type=str, help="Write a PNG image to this path")
    qr_out.add_argument("--data-url", action="store_true", help="Print a data:image/png URL")
    qr.add_argument("--size", type=int, default=None, help="PNG size in pixels")

    return parser


def _emit(console: Console, text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _usage_error(message: str) -> int:
    Console(stderr=True).print(f"[red]{escape(message)}[/red]", highlight=False)
    return EXIT_ERROR


def _cmd_keygen(args, config: Config, console: Console) -> int:
    if args.salt and not args.password:
        return _usage_error("--salt requires --password")

    if not args.password:
        _emit(console, crypto.generate_key())
        return EXIT_OK

    if args.salt:
        try:
            salt = base64.b64decode(args.salt, validate=True)
        except (binascii.Error, ValueError):
            return _usage_error("Salt is not valid base64")
    else:
        salt = crypto.generate_salt()

    _emit(console, crypto.derive_key(args.password, salt))
    _emit(console, f"salt: {base64.b64encode(salt).decode('ascii')}")
    return EXIT_OK


def _cmd_encrypt(args, config: Config, console: Console) -> int:
    if args.text is not None:
        _emit(console, crypto.encrypt_text(args.text, args.key))
        return EXIT_OK

    if not args.outfile:
        return _usage_error("--out is required with --in")

    written = crypto.encrypt_file(args.infile, args.outfile, args.key)
    console.print(f"Encrypted [bold]{escape(args.infile)}[/bold] -> {escape(args.outfile)} ({written} bytes)")
    return EXIT_OK


def _cmd_decrypt(args, config: Config, console: Console) -> int:
    if args.envelope is not None:
        _emit(console, crypto.decrypt_text(args.envelope, args.key))
        return EXIT_OK

    if not args.outfile:
        return _usage_error("--out is required with --in")

    written = crypto.decrypt_file(args.infile, args.outfile, args.key)
    console.print(f"Decrypted [bold]{escape(args.infile)}[/bold] -> {escape(args.outfile)} ({written} bytes)")
    return EXIT_OK


def _cmd_invite(args, config: Config, console: Console) -> int:
    code = invite.generate_invite_code()
    _emit(console, code)
    if args.qr:
        art = qr_code.display_qr_terminal(code, border=config.get("qr", "border"))
        console.print(Panel(art, title="Invite code", expand=False))
    return EXIT_OK


def _cmd_password(args, config: Config, console: Console) -> int:
    _emit(console, invite.generate_password())
    return EXIT_OK


def _cmd_qr(args, config: Config, console: Console) -> int:
    size = args.size or config.get("qr", "size")

    if args.png:
        png = qr_code.generate_qr_png(
            args.data,
            size=size,
            error_correction=config.get("qr", "error_correction"),
            border=config.get("qr", "border"),
        )
        path = Path(args.png)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(png)
        console.print(f"Wrote QR code to [bold]{escape(str(path))}[/bold] ({len(png)} bytes)")
    elif args.data_url:
        url = qr_code.generate_qr_data_url(
            args.data,
            size=size,
            error_correction=config.get("qr", "error_correction"),
            border=config.get("qr", "border"),
        )
        _emit(console, url)
    else:
        _emit(console, qr_code.display_qr_terminal(args.data, border=config.get("qr", "border")))
    return EXIT_OK


COMMANDS = {
    "keygen": _cmd_keygen,
    "encrypt": _cmd_encrypt,
    "decrypt": _cmd_decrypt,
    "invite": _cmd_invite,
    "password": _cmd_password,
    "qr": _cmd_qr,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the peershare command."""
    args = _build_parser().parse_args(argv)
    err_console = Console(stderr=True)

    try:
        config = Config(Path(args.config) if args.config else None)
    except PeerShareError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
        return EXIT_ERROR

    setup_logging(config, level="DEBUG" if args.debug else None)
    console = Console(no_color=not config.get("output", "color", True))

    try:
        return COMMANDS[args.command](args, config, console)
    except PeerShareError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
        return EXIT_ERROR
    except EntropyError as e:
        err_console.print(f"[bold red]Fatal: {escape(str(e))}[/bold red]", highlight=False)
        return EXIT_ENTROPY


if __name__ == "__main__":
    sys.exit(main())
