"""CLI for PassForge: password, passphrase, regenerate (with saved settings), settings."""

import argparse
import sys
from typing import List, Optional

from rich import print
from rich.markup import escape
from rich.table import Table

from .config import load_config, settings_path
from .constants import DEFAULT_SEPARATOR, DEFAULT_WORD_COUNT
from .errors import PassForgeError
from .generator import PasswordGenerator, PasswordRequest
from .log import setup_logging
from .passphrase import PassphraseGenerator, PassphraseRequest
from .settings import JsonSettingsStore

EXIT_USAGE = 2

def _store(args) -> JsonSettingsStore:
    return JsonSettingsStore(args.settings_file or settings_path(args.config))

def _length(args) -> int:
    if args.length is not None:
        return args.length
    return args.config.get("default_length", 16)

def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n

def cmd_password(args):
    gen = PasswordGenerator(_store(args))
    request = PasswordRequest(
        length=_length(args),
        include_uppercase=args.upper,
        include_lowercase=args.lower,
        include_numbers=args.digits,
        include_special_chars=args.symbols,
        exclude_characters=args.exclude,
    )
    for i in range(args.copies):
        # only the first copy records settings
        pw = gen.generate(request if i == 0 else PasswordRequest.from_settings(request.settings, request.length, request.exclude_characters))
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")

def cmd_passphrase(args):
    gen = PassphraseGenerator(_store(args))
    request = PassphraseRequest(
        word_count=args.words,
        separator=args.separator,
        include_uppercase=args.upper,
        include_lowercase=args.lower,
        include_numbers=args.digits,
        include_special_chars=args.symbols,
    )
    for i in range(args.copies):
        phrase = gen.generate(request if i == 0 else PassphraseRequest.from_settings(request.settings))
        print(f"[bold green]Passphrase #{i+1}:[/bold green] {escape(phrase)}")

def cmd_regenerate(args):
    store = _store(args)
    if args.kind == "password":
        request = PasswordRequest.from_settings(
            store.get_password_settings(),
            length=_length(args),
            exclude_characters=args.exclude,
        )
        print(f"[bold green]Password:[/bold green] {escape(PasswordGenerator(store).generate(request))}")
    else:
        request = PassphraseRequest.from_settings(store.get_passphrase_settings())
        print(f"[bold green]Passphrase:[/bold green] {escape(PassphraseGenerator(store).generate(request))}")

def cmd_settings(args):
    store = _store(args)
    table = Table(show_header=True, header_style="bold cyan", title=f"Saved settings ({store.path})")
    table.add_column("Generator")
    table.add_column("Setting")
    table.add_column("Value")
    for name, value in store.get_password_settings().to_dict().items():
        table.add_row("password", name, str(value))
    for name, value in store.get_passphrase_settings().to_dict().items():
        table.add_row("passphrase", name, repr(value) if isinstance(value, str) else str(value))
    print(table)

def _add_class_flags(p):
    p.add_argument("--upper", action="store_true", help="Include uppercase letters")
    p.add_argument("--lower", action="store_true", help="Include lowercase letters")
    p.add_argument("--digits", action="store_true", help="Include numbers")
    p.add_argument("--symbols", action="store_true", help="Include special characters")
    p.add_argument("--copies", type=_positive_int, default=1, help="How many to generate")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passforge")
    parser.add_argument("--settings-file", type=str, help="Where last-used settings are stored")
    parser.add_argument("--config", dest="config_file", type=str, help="Path to config.json")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    pw = sub.add_parser("password", help="Generate one or more passwords")
    pw.add_argument("--length", type=int, help="Password length (1-128)")
    pw.add_argument("--exclude", type=str, default="", help="Characters to leave out, e.g. '0O1lI' or '0,O,1'")
    _add_class_flags(pw)
    pw.set_defaults(func=cmd_password)

    pp = sub.add_parser("passphrase", help="Generate one or more passphrases")
    pp.add_argument("--words", type=int, default=DEFAULT_WORD_COUNT, help="Number of words (1-20)")
    pp.add_argument("--separator", type=str, default=DEFAULT_SEPARATOR, help="Word separator")
    _add_class_flags(pp)
    pp.set_defaults(func=cmd_passphrase)

    rg = sub.add_parser("regenerate", help="Generate again with the saved settings")
    rg.add_argument("kind", choices=["password", "passphrase"])
    rg.add_argument("--length", type=int, help="Password length (1-128)")
    rg.add_argument("--exclude", type=str, default="", help="Characters to leave out")
    rg.set_defaults(func=cmd_regenerate)

    st = sub.add_parser("settings", help="Show the saved settings")
    st.set_defaults(func=cmd_settings)
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.config = load_config(args.config_file)
    setup_logging("DEBUG" if args.verbose else args.config.get("log_level", "WARNING"))
    try:
        args.func(args)
    except (PassForgeError, ValueError) as e:
        print(f"[red]{escape(str(e))}[/red]")
        return EXIT_USAGE
    return 0

if __name__ == "__main__":
    sys.exit(main())
