"""Command-line interface: encode or decode text from arguments, files or stdin."""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from ._config import _delongate_default, _log_level
from .codec import decode_string, encode_string
from .errors import DecodeError
from .table import render_table

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``bottomify`` command."""
    parser = argparse.ArgumentParser(
        prog="bottomify",
        description="Fantastic (maybe) CLI for translating between bottom and human-readable text",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "-b", "--bottomify", action="store_true", help="translate text to bottom"
    )
    mode.add_argument(
        "-r", "--regress", action="store_true", help="translate bottom to human-readable text"
    )
    mode.add_argument(
        "--table", action="store_true", help="print the byte to token table"
    )
    parser.add_argument(
        "-l",
        "--delongate",
        action="store_true",
        default=_delongate_default(),
        help="expand :alias: names before decoding",
    )
    parser.add_argument("-i", "--input", type=Path, help="input file")
    parser.add_argument("-o", "--output", type=Path, help="output file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("text", nargs="*", help="text to translate")
    return parser


def _read_input(args: argparse.Namespace) -> str | bytes:
    """
    Positional words take priority over the input file, then stdin.

    Input to be encoded is read as raw bytes so that binary files and line
    endings survive unchanged.
    """
    if args.text:
        return " ".join(args.text)
    if args.input is not None:
        log.info(f"reading input from {args.input}")
        if args.bottomify:
            return args.input.read_bytes()
        return args.input.read_text(encoding="utf-8")
    if args.bottomify:
        return sys.stdin.buffer.read()
    return sys.stdin.read()


def _write_output(args: argparse.Namespace, result: str) -> None:
    if args.output is None:
        sys.stdout.write(result)
        if not result.endswith("\n"):
            sys.stdout.write("\n")
        return

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(result, encoding="utf-8", newline="\n")
    log.info(f"wrote {len(result)} characters to {args.output}")


def main(argv: list[str] | None = None) -> int:
    """
    Run the command line tool.

    :param argv: Arguments without the program name, ``sys.argv[1:]`` if None.
    :returns: Process exit status.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Configure logging to show messages at the configured level and above.
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else _log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.table:
        _write_output(args, render_table())
        return 0

    if args.input is not None and args.text:
        parser.error("give either text arguments or --input, not both")

    text = _read_input(args)

    if args.bottomify:
        log.info(f"encoding input of length {len(text)}")
        result = encode_string(text)
    else:
        # trailing newline from files and pipes is not part of the payload
        text = text.rstrip("\r\n")
        log.info(f"decoding {len(text)} characters (delongate={args.delongate})")
        try:
            result = decode_string(text, delongate=args.delongate)
        except DecodeError as e:
            log.error(f"failed to decode input: {e}")
            return 1

    _write_output(args, result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
