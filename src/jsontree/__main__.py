"""Command line entry point: parse a file and print its value tree."""

import argparse
import logging
import pprint
import sys
from pathlib import Path

from . import ParseConfig
from . import ParseError
from . import parse

logger = logging.getLogger("jsontree")

USAGE = "Usage: jsontree [file path]"


def _depth_limit(text: str) -> int:
    try:
        depth = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid depth: {text!r}"
        ) from None
    if depth < 1:
        raise argparse.ArgumentTypeError("depth must be at least 1")
    return depth


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsontree",
        description="Parse a JSON document and print the resulting value tree.",
    )
    parser.add_argument("path", nargs="?", help="file to parse")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    parser.add_argument(
        "--double",
        action="store_true",
        help="keep numbers at 64-bit precision instead of 32-bit",
    )
    parser.add_argument(
        "--max-depth",
        type=_depth_limit,
        default=None,
        help="maximum container nesting (default: interpreter stack)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.path is None:
        print(USAGE)
        return 2
    try:
        text = Path(args.path).read_text(encoding="utf-8")
    except OSError as e:
        logger.debug("Cannot read %s: %s", args.path, e)
        print(USAGE)
        return 2
    except UnicodeDecodeError as e:
        print(f"{args.path}: not valid UTF-8: {e}", file=sys.stderr)
        return 1

    config = ParseConfig(
        single_precision=not args.double, max_depth=args.max_depth
    )
    try:
        remaining, value = parse(text, config)
    except ParseError as e:
        print(f"{args.path}: {e}", file=sys.stderr)
        return 1

    if remaining:
        logger.warning(
            "Ignoring %d characters after the value in %s",
            len(remaining),
            args.path,
        )
    print(pprint.pformat(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
