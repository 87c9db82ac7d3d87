"""``hjson-props`` CLI: print the flattened properties of Hjson files.

Usage::

    hjson-props [-v] [--encoding ENC] FILE...

Prints one ``key=value`` line per property, in document order.
Exit status: 0 on success, 1 on usage errors, 2 if any file fails to load.
"""

from __future__ import annotations

import argparse
import codecs
import contextlib
import logging
import sys
from typing import IO

from .errors import HjsonPropsError
from .loader import load_properties

logger = logging.getLogger(__name__)


def _encoding(name: str) -> str:
    try:
        codecs.lookup(name)
    except LookupError:
        raise argparse.ArgumentTypeError(f"unknown encoding: {name!r}")
    return name


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hjson-props",
        description="Print Hjson files as flattened key=value properties",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log loading details to stderr")
    p.add_argument("--encoding", type=_encoding, default="utf-8",
                   help="Text encoding of the files (default: utf-8)")
    p.add_argument("files", nargs="+", metavar="FILE", help="Hjson file, or - for stdin")
    return p


def _print_properties(properties: dict[str, str], dest: IO[str]) -> None:
    for key, value in properties.items():
        print(f"{key}={value}", file=dest)


def run(argv: list[str], dest: IO[str], err: IO[str]) -> int:
    """Run the CLI against *argv*, writing to *dest* / *err*. Returns the exit code."""
    try:
        with contextlib.redirect_stdout(dest), contextlib.redirect_stderr(err):
            args = build_parser().parse_args(argv)
    except SystemExit as exc:
        # --help exits 0; argparse reports usage errors as 2
        return 0 if exc.code in (0, None) else 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    status = 0
    for path in args.files:
        try:
            if path == "-":
                properties = load_properties(sys.stdin, encoding=args.encoding)
            else:
                properties = load_properties(path, encoding=args.encoding)
        except HjsonPropsError as exc:
            print(f"Error: {exc}", file=err)
            status = 2
            continue
        logger.debug("%s: %d properties", path, len(properties))
        _print_properties(properties, dest)
    return status


def main() -> None:
    """Console entry point (``hjson-props`` / ``python -m hjson_props``)."""
    sys.exit(run(sys.argv[1:], sys.stdout, sys.stderr))


if __name__ == "__main__":
    main()
