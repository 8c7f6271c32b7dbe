import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from betwixt.log import configure_logging
from betwixt.markup import preview_replacements
from betwixt.models import DelimiterMode, ReplaceRequest
from betwixt.replace import replace_between_detailed
from betwixt.scan import scan

logger = structlog.get_logger(__name__)


def _read_source(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text

    if args.file is not None:
        if not args.file.exists():
            print(f"Error: File {args.file} not found.", file=sys.stderr)
            sys.exit(1)
        return args.file.read_text(encoding="utf-8")

    return sys.stdin.read()


def _build_request(args: argparse.Namespace) -> ReplaceRequest:
    return ReplaceRequest(
        source=_read_source(args),
        opening=args.opening,
        closing=args.closing,
        replacement=args.replacement,
        case_insensitive=args.ignore_case,
        mode=DelimiterMode.STRIP if args.strip_delimiters else DelimiterMode.PRESERVE,
        limit=args.limit,
    )


def handle_replace(args: argparse.Namespace):
    request = _build_request(args)
    result = replace_between_detailed(request)
    logger.info(f"Replaced {result.match_count} span(s)")
    sys.stdout.write(result.output)


def handle_preview(args: argparse.Namespace):
    request = _build_request(args)
    matches = scan(request.source, request.opening, request.closing, request.case_insensitive, request.limit)
    logger.info(f"Previewing {len(matches)} span(s)")
    sys.stdout.write(
        preview_replacements(
            request.source,
            matches,
            request.replacement,
            preserve_delimiters=request.mode == DelimiterMode.PRESERVE,
        )
    )


def handle_serve(args: argparse.Namespace):
    # Deferred so the filter commands don't pay for the MCP import.
    from betwixt.server import run

    run()


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def _add_replace_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("opening", help="Opening delimiter (literal text)")
    parser.add_argument("closing", help="Closing delimiter (literal text)")
    parser.add_argument("replacement", help="Text to put between the delimiters")

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", help="Source text (default: read stdin)")
    source.add_argument("--file", type=Path, help="Read source text from a UTF-8 file")

    parser.add_argument("-i", "--ignore-case", action="store_true", help="Match delimiters under Unicode case folding")
    parser.add_argument(
        "--strip-delimiters",
        action="store_true",
        help="Replace the delimiters along with the text between them",
    )
    parser.add_argument("--limit", type=_non_negative_int, default=None, help="Replace at most N spans")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="betwixt", description="Betwixt: replace text between delimiters")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    replace_parser = subparsers.add_parser("replace", help="Write the replaced text to stdout")
    _add_replace_arguments(replace_parser)
    replace_parser.set_defaults(func=handle_replace)

    preview_parser = subparsers.add_parser("preview", help="Write a CriticMarkup preview of the replacements")
    _add_replace_arguments(preview_parser)
    preview_parser.set_defaults(func=handle_preview)

    serve_parser = subparsers.add_parser("serve", help="Run the MCP tool server over stdio")
    serve_parser.set_defaults(func=handle_serve)

    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    args.func(args)


if __name__ == "__main__":
    main()
