"""
Command-line interface for wordlists.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from wordlists import __version__
from wordlists.builder import build_store
from wordlists.config import WordlistsConfig, load_config
from wordlists.exceptions import ConfigError, WordlistsError
from wordlists.manager import WordlistManager
from wordlists.models import MetadataKey


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the wordlists CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except ConfigError as e:
        print(f"[CONFIG ERROR] {e}")
        if e.line:
            print(f"               Line: {e.line}")
        return 1
    except (WordlistsError, FileNotFoundError, FileExistsError) as e:
        print(f"[ERROR] {e}")
        return 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wordlists",
        description="Inspect and build locale-aware wordlists",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    # Options shared by the commands that look lists up
    source_options = argparse.ArgumentParser(add_help=False)
    source_options.add_argument(
        "--config", "-c",
        type=Path,
        help="YAML configuration file",
    )
    source_options.add_argument(
        "--path", "-p",
        type=Path,
        action="append",
        default=[],
        help="Directory containing wordlists (repeatable)",
    )
    source_options.add_argument(
        "--policy",
        type=str,
        help="Space-separated allow/deny patterns (overrides configuration)",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # list command
    list_parser = subparsers.add_parser(
        "list",
        parents=[source_options],
        help="List available wordlists",
    )
    list_parser.set_defaults(func=cmd_list)

    # show command
    show_parser = subparsers.add_parser(
        "show",
        parents=[source_options],
        help="Show metadata of a wordlist",
    )
    show_parser.add_argument("name", help="Wordlist name")
    show_parser.set_defaults(func=cmd_show)

    # lookup command
    lookup_parser = subparsers.add_parser(
        "lookup",
        parents=[source_options],
        help="Look words up in a wordlist",
    )
    lookup_parser.add_argument("name", help="Wordlist name")
    lookup_parser.add_argument("words", nargs="+", help="Words to look up")
    lookup_parser.set_defaults(func=cmd_lookup)

    # build command
    build_parser = subparsers.add_parser(
        "build",
        help="Convert a text wordlist into an indexed store",
    )
    build_parser.add_argument("source", type=Path, help="Text wordlist (.txt)")
    build_parser.add_argument("destination", type=Path, help="Store to create (.sqlite)")
    build_parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite an existing store",
    )
    build_parser.set_defaults(func=cmd_build)

    return parser


def _make_manager(args: argparse.Namespace) -> WordlistManager:
    config = load_config(args.config) if args.config else WordlistsConfig()
    config.paths = [*config.paths, *args.path]
    if args.policy is not None:
        config.policy = args.policy
    return WordlistManager.from_config(config)


def cmd_list(args: argparse.Namespace) -> int:
    """Handle list command."""
    manager = _make_manager(args)
    names = manager.get_available_names()
    if not names:
        print("No wordlists found.")
        return 0
    for name in names:
        print(f"{name:<30} {manager.locate(name)}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Handle show command."""
    manager = _make_manager(args)
    with manager.checkout(args.name) as wordlist:
        for key in MetadataKey:
            value = wordlist.get_metadata(key)
            if isinstance(value, tuple):
                value = ", ".join(value)
            if value:
                print(f"  {key.value:<12} {value}")
        print(f"  {'words':<12} {wordlist.count()}")
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    """Handle lookup command."""
    manager = _make_manager(args)
    missing = 0
    with manager.checkout(args.name) as wordlist:
        for word in args.words:
            match = wordlist.find_canonical(word)
            if match is None:
                missing += 1
                print(f"  {word}: not found")
            else:
                print(f"  {word}: {match}")
    return 1 if missing else 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle build command."""
    count = build_store(args.source, args.destination, overwrite=args.force)
    print(f"Wrote {count} word(s) to {args.destination}")
    return 0
