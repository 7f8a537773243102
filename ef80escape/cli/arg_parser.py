"""Argument parsing for the ef80escape CLI."""

import argparse

from ef80escape import __version__


def add_io_args(parser: argparse.ArgumentParser) -> None:
    """Add INPUT and --output arguments to a parser."""
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        metavar="INPUT",
        help="Input file (default: stdin)",
    )
    parser.add_argument(
        "--output", "-o",
        default="-",
        metavar="OUTPUT",
        help="Output file (default: stdout)",
    )


def add_json_args(parser: argparse.ArgumentParser) -> None:
    """Add --json and --field arguments to a parser."""
    parser.add_argument(
        "--json",
        action="store_true",
        dest="use_json",
        help="Wrap the encoded text in a JSON object",
    )
    parser.add_argument(
        "--field", "-f",
        metavar="NAME",
        help="JSON field holding the encoded text (default: payload.field from config)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="ef80escape",
        description="Lossless conversion between arbitrary bytes and UTF-8 text",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="Config file (default: ~/.ef80escape/config.json merged with ./.ef80escape/config.json)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser(
        "encode",
        help="Convert bytes to text",
        description="Read raw bytes and write text that 'decode' turns back into them.",
    )
    add_io_args(encode_parser)
    add_json_args(encode_parser)

    decode_parser = subparsers.add_parser(
        "decode",
        help="Convert text back to bytes",
        description="Read UTF-8 text produced by 'encode' and write the original bytes.",
    )
    add_io_args(decode_parser)
    add_json_args(decode_parser)

    check_parser = subparsers.add_parser(
        "check",
        help="Verify that a file survives an encode/decode round trip",
    )
    check_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        metavar="INPUT",
        help="Input file (default: stdin)",
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
