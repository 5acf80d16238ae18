"""
Dotty CLI Entry Point
=====================

Usage:
    python -m Dotty.cli                       # Interactive REPL
    python -m Dotty.cli encode "Hello World"  # Single conversion
    python -m Dotty.cli decode -.- ---        # Morse words are taken verbatim
    python -m Dotty.cli config init           # Write ~/.dotty/config.yaml
    python -m Dotty.cli --help                # Show help
"""

import sys
import logging
import argparse
from typing import List, Optional, Tuple

# Subcommands whose words are conversion input, not options.
PAYLOAD_COMMANDS = ("encode", "decode")

# Global options that consume the following argument.
_VALUE_OPTIONS = ("-c", "--config")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dotty",
        description="Dotty - convert between text and Morse code",
    )

    parser.add_argument(
        "-v", "--version",
        action="store_true",
        help="Show version and exit"
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Path to config file (default: ~/.dotty/config.yaml)"
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    encode_parser = subparsers.add_parser("encode", help="Convert text to Morse code")
    encode_parser.add_argument("text", nargs="*", help="Text to encode (default: read stdin)")

    decode_parser = subparsers.add_parser("decode", help="Convert Morse code to text")
    decode_parser.add_argument("code", nargs="*", help="Morse code to decode (default: read stdin)")

    subparsers.add_parser("table", help="Show the Morse symbol table")

    config_parser = subparsers.add_parser("config", help="Manage the config file")
    config_actions = config_parser.add_subparsers(dest="config_action", required=True)

    init_parser = config_actions.add_parser("init", help="Write the default config file")
    init_parser.add_argument("--force", action="store_true", help="Overwrite an existing file")

    get_parser = config_actions.add_parser("get", help="Print a setting, e.g. ui.theme")
    get_parser.add_argument("key")

    set_parser = config_actions.add_parser("set", help="Change a setting and save it")
    set_parser.add_argument("key")
    set_parser.add_argument("value")

    return parser


def split_payload(argv: List[str]) -> Tuple[List[str], Optional[List[str]]]:
    """
    Separate the words of an encode/decode command from the arguments argparse sees.

    Morse tokens such as "-.-" or "---" look like options, so everything after
    the subcommand is kept verbatim. A leading "--" is dropped as the usual
    end-of-options marker.

    Returns:
        (arguments for argparse, conversion words or None)
    """
    index = 0
    while index < len(argv):
        arg = argv[index]
        if arg in _VALUE_OPTIONS:
            index += 2
        elif arg.startswith("-"):
            index += 1
        else:
            break

    if index >= len(argv) or argv[index] not in PAYLOAD_COMMANDS:
        return argv, None

    head, words = argv[:index + 1], argv[index + 1:]
    if words in (["-h"], ["--help"]):
        return argv, None
    if words and words[0] == "--":
        words = words[1:]
    return head, words


def _read_input(words: List[str]) -> str:
    if words:
        return " ".join(words)
    return sys.stdin.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for Dotty CLI."""
    parser = build_parser()
    head, words = split_payload(sys.argv[1:] if argv is None else list(argv))
    args = parser.parse_args(head)

    if args.version:
        from . import __version__
        print(f"Dotty CLI v{__version__}")
        return 0

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    from .app import DottyCLI

    try:
        cli = DottyCLI(
            config_path=args.config,
            no_color=args.no_color,
            debug=args.debug
        )

        if args.command == "encode":
            cli.convert("encode", _read_input(words or args.text))
            return 0

        if args.command == "decode":
            cli.convert("decode", _read_input(words or args.code))
            return 0

        if args.command == "table":
            cli.show_table()
            return 0

        if args.command == "config":
            return cli.configure(
                args.config_action,
                key=getattr(args, "key", None),
                value=getattr(args, "value", None),
                force=getattr(args, "force", False),
            )

        return cli.run_interactive()

    except KeyboardInterrupt:
        print("\nGoodbye!")
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
