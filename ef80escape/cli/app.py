"""Entry point for the ef80escape command.

Reads raw bytes or encoded text from a file or stdin and writes the
conversion to a file or stdout. Any Ef80Error is reported on stderr and turns
into exit status 1.
"""

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from ef80escape.cli.arg_parser import parse_args
from ef80escape.cli.bootstrap import configure_logging, configure_stdio
from ef80escape.cli.output import print_error, print_info, print_report
from ef80escape.config.loader import load_config
from ef80escape.config.schema import Config
from ef80escape.core.codec import analyze, decode, encode
from ef80escape.core.errors import Ef80Error, PayloadError
from ef80escape.core.jsontext import dumps_field, loads_field

logger = logging.getLogger(__name__)

STDIO = "-"


def _read_input(source: str) -> bytes:
    if source == STDIO:
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def _write_output(target: str, data: bytes) -> None:
    if target == STDIO:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    Path(target).write_bytes(data)


def _field_name(args: argparse.Namespace, config: Config) -> str:
    return args.field or config.payload.field


def cmd_encode(args: argparse.Namespace, config: Config) -> int:
    """Bytes in, text (or a JSON document) out."""
    raw = _read_input(args.input)

    if args.use_json:
        text = dumps_field(
            raw,
            _field_name(args, config),
            ensure_ascii=config.payload.ensure_ascii,
            indent=config.payload.indent,
        ) + "\n"
    else:
        text = encode(raw)

    _write_output(args.output, text.encode("utf-8"))
    logger.info("Encoded %d bytes from %s into %d characters", len(raw), args.input, len(text))
    if args.output != STDIO:
        print_info(f"Encoded {len(raw)} bytes into {len(text)} characters -> {args.output}")
    return 0


def cmd_decode(args: argparse.Namespace, config: Config) -> int:
    """Text (or a JSON document) in, bytes out."""
    raw = _read_input(args.input)

    if args.use_json:
        data = loads_field(raw, _field_name(args, config))
    else:
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise PayloadError(
                f"Input is not valid UTF-8 text (byte {e.start}): {e.reason}"
            ) from e
        data = decode(text)

    _write_output(args.output, data)
    logger.info("Decoded %s into %d bytes", args.input, len(data))
    if args.output != STDIO:
        print_info(f"Decoded {len(data)} bytes -> {args.output}")
    return 0


def cmd_check(args: argparse.Namespace, config: Config) -> int:
    """Round-trip the input and report how it was encoded."""
    raw = _read_input(args.input)
    report = analyze(raw)
    round_trip_ok = decode(encode(raw)) == raw

    source = "<stdin>" if args.input == STDIO else args.input
    print_report(source, report, round_trip_ok)
    if not round_trip_ok:
        logger.error("Round trip mismatch for %s", source)
        return 1
    return 0


COMMANDS: dict[str, Callable[[argparse.Namespace, Config], int]] = {
    "encode": cmd_encode,
    "decode": cmd_decode,
    "check": cmd_check,
}


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = parse_args(argv)
    configure_stdio()

    try:
        config = load_config(Path(args.config) if args.config else None)
    except Ef80Error as e:
        print_error(e.message)
        return 1

    level = logging.DEBUG if args.verbose else logging.getLevelName(config.logging.level)
    log_file = Path(config.logging.file) if config.logging.file else None
    configure_logging(level, log_file)

    handler = COMMANDS[args.command]
    try:
        return handler(args, config)
    except Ef80Error as e:
        logger.debug("%s failed: %s", args.command, e.message)
        print_error(e.message)
        return 1
    except OSError as e:
        print_error(f"I/O error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
